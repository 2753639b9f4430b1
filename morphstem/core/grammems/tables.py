from enum import Enum


class PartOfSpeech(Enum):
    ADJECTIVE = "A"
    ADVERB = "ADV"
    ADVERB_PRONOMINAL = "ADVPRO"
    ADJECTIVE_NUMERAL = "ANUM"
    ADJECTIVE_PRONOUN = "APRO"
    COMPOSITE = "COM"
    CONJUNCTION = "CONJ"
    INTERJECTION = "INTJ"
    NUMERAL = "NUM"
    PARTICLE = "PART"
    PREPOSITION = "PR"
    NOUN = "S"
    NOUN_PRONOUN = "SPRO"
    VERB = "V"


class Case(Enum):
    NOMINATIVE = "nom"
    GENITIVE = "gen"
    DATIVE = "dat"
    ACCUSATIVE = "acc"
    INSTRUMENTAL = "ins"
    PREPOSITIONAL = "abl"
    PARTITIVE = "part"
    LOCATIVE = "loc"
    VOCATIVE = "voc"


class Tense(Enum):
    PRESENT = "praes"
    NON_PAST = "inpraes"
    PAST = "praet"


class Plurality(Enum):
    SINGULAR = "sg"
    PLURAL = "pl"


class Mood(Enum):
    GERUND = "ger"
    INFINITIVE = "inf"
    PARTICIPLE = "partcp"
    INDICATIVE = "indic"
    IMPERATIVE = "imper"


class AdjectiveForm(Enum):
    SHORT = "brev"
    LONG = "plen"
    POSSESSIVE = "poss"


class ComparativeDegree(Enum):
    SUPERLATIVE = "supr"
    COMPARATIVE = "comp"


class Person(Enum):
    FIRST = "1p"
    SECOND = "2p"
    THIRD = "3p"


class Gender(Enum):
    MASCULINE = "m"
    FEMININE = "f"
    NEUTER = "n"


class Aspect(Enum):
    PERFECTIVE = "pf"
    IMPERFECTIVE = "ipf"


class Voice(Enum):
    ACTIVE = "act"
    PASSIVE = "pass"


class Animacy(Enum):
    ANIMATE = "anim"
    INANIMATE = "inan"


class Transitivity(Enum):
    TRANSITIVE = "tran"
    INTRANSITIVE = "intr"


class Other(Enum):
    PARENTHESIS = "parenth"
    GEO = "geo"
    AWKWARD = "awkw"
    PROPER_NOUN = "persn"
    DISTORTED = "dist"
    COMMON_FORM = "mf"
    OBSCENE = "obsc"
    PATRONYMIC = "patrn"
    PREDICATIVE = "praed"
    INFORMAL = "inform"
    RARE = "rare"
    ABBREVIATION = "abbr"
    OBSOLETE = "obsol"
    FAMILY_NAME = "famn"


Fact = (
    Case
    | Tense
    | Plurality
    | Mood
    | AdjectiveForm
    | ComparativeDegree
    | Person
    | Gender
    | Aspect
    | Voice
    | Animacy
    | Transitivity
    | Other
)

FACT_CATEGORIES: tuple[type[Enum], ...] = (
    Case,
    Tense,
    Plurality,
    Mood,
    AdjectiveForm,
    ComparativeDegree,
    Person,
    Gender,
    Aspect,
    Voice,
    Animacy,
    Transitivity,
    Other,
)


PART_OF_SPEECH_CODES: dict[str, PartOfSpeech] = {
    "A": PartOfSpeech.ADJECTIVE,
    "ADV": PartOfSpeech.ADVERB,
    "ADVPRO": PartOfSpeech.ADVERB_PRONOMINAL,
    "ANUM": PartOfSpeech.ADJECTIVE_NUMERAL,
    "APRO": PartOfSpeech.ADJECTIVE_PRONOUN,
    "COM": PartOfSpeech.COMPOSITE,
    "CONJ": PartOfSpeech.CONJUNCTION,
    "INTJ": PartOfSpeech.INTERJECTION,
    "NUM": PartOfSpeech.NUMERAL,
    "PART": PartOfSpeech.PARTICLE,
    "PR": PartOfSpeech.PREPOSITION,
    "S": PartOfSpeech.NOUN,
    "SPRO": PartOfSpeech.NOUN_PRONOUN,
    "V": PartOfSpeech.VERB,
}

FACT_CODES: dict[str, Fact] = {
    # case
    "nom": Case.NOMINATIVE,
    "gen": Case.GENITIVE,
    "dat": Case.DATIVE,
    "acc": Case.ACCUSATIVE,
    "ins": Case.INSTRUMENTAL,
    "abl": Case.PREPOSITIONAL,
    "part": Case.PARTITIVE,
    "loc": Case.LOCATIVE,
    "voc": Case.VOCATIVE,
    # tense
    "praes": Tense.PRESENT,
    "inpraes": Tense.NON_PAST,
    "praet": Tense.PAST,
    # number
    "sg": Plurality.SINGULAR,
    "pl": Plurality.PLURAL,
    # verb form / mood
    "ger": Mood.GERUND,
    "inf": Mood.INFINITIVE,
    "partcp": Mood.PARTICIPLE,
    "indic": Mood.INDICATIVE,
    "imper": Mood.IMPERATIVE,
    # adjective form
    "brev": AdjectiveForm.SHORT,
    "plen": AdjectiveForm.LONG,
    "poss": AdjectiveForm.POSSESSIVE,
    # degree
    "supr": ComparativeDegree.SUPERLATIVE,
    "comp": ComparativeDegree.COMPARATIVE,
    # person
    "1p": Person.FIRST,
    "2p": Person.SECOND,
    "3p": Person.THIRD,
    # gender
    "m": Gender.MASCULINE,
    "f": Gender.FEMININE,
    "n": Gender.NEUTER,
    # aspect
    "pf": Aspect.PERFECTIVE,
    "ipf": Aspect.IMPERFECTIVE,
    # voice
    "act": Voice.ACTIVE,
    "pass": Voice.PASSIVE,
    # animacy
    "anim": Animacy.ANIMATE,
    "inan": Animacy.INANIMATE,
    # transitivity
    "tran": Transitivity.TRANSITIVE,
    "intr": Transitivity.INTRANSITIVE,
    # usage and lexical markers
    "parenth": Other.PARENTHESIS,
    "geo": Other.GEO,
    "awkw": Other.AWKWARD,
    "persn": Other.PROPER_NOUN,
    "dist": Other.DISTORTED,
    "mf": Other.COMMON_FORM,
    "obsc": Other.OBSCENE,
    "patrn": Other.PATRONYMIC,
    "praed": Other.PREDICATIVE,
    "inform": Other.INFORMAL,
    "rare": Other.RARE,
    "abbr": Other.ABBREVIATION,
    "obsol": Other.OBSOLETE,
    "famn": Other.FAMILY_NAME,
}


PART_OF_SPEECH_RU = {
    PartOfSpeech.ADJECTIVE: "Прилагательное",
    PartOfSpeech.ADVERB: "Наречие",
    PartOfSpeech.ADVERB_PRONOMINAL: "Местоименное наречие",
    PartOfSpeech.ADJECTIVE_NUMERAL: "Числительное-прилагательное",
    PartOfSpeech.ADJECTIVE_PRONOUN: "Местоимение-прилагательное",
    PartOfSpeech.COMPOSITE: "Часть композита",
    PartOfSpeech.CONJUNCTION: "Союз",
    PartOfSpeech.INTERJECTION: "Междометие",
    PartOfSpeech.NUMERAL: "Числительное",
    PartOfSpeech.PARTICLE: "Частица",
    PartOfSpeech.PREPOSITION: "Предлог",
    PartOfSpeech.NOUN: "Существительное",
    PartOfSpeech.NOUN_PRONOUN: "Местоимение-существительное",
    PartOfSpeech.VERB: "Глагол",
}

# Coarse mapping for the generic backend model (mystem tags -> UD-like POS).
MYSTEM_POS_TO_UPOS = {
    PartOfSpeech.ADJECTIVE: "ADJ",
    PartOfSpeech.ADVERB: "ADV",
    PartOfSpeech.ADVERB_PRONOMINAL: "ADV",
    PartOfSpeech.ADJECTIVE_NUMERAL: "ADJ",
    PartOfSpeech.ADJECTIVE_PRONOUN: "DET",
    PartOfSpeech.COMPOSITE: "X",
    PartOfSpeech.CONJUNCTION: "CCONJ",
    PartOfSpeech.INTERJECTION: "INTJ",
    PartOfSpeech.NUMERAL: "NUM",
    PartOfSpeech.PARTICLE: "PART",
    PartOfSpeech.PREPOSITION: "ADP",
    PartOfSpeech.NOUN: "NOUN",
    PartOfSpeech.NOUN_PRONOUN: "PRON",
    PartOfSpeech.VERB: "VERB",
}
