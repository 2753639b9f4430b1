import json
import logging
import shutil
import time

import pytest

from morphstem.core.backends.mystem_backend import MyStem, MystemBackend
from morphstem.core.errors import GrammemError, ProcessSpawnError
from morphstem.core.grammems.tables import Case, PartOfSpeech


def test_stemming_sanitizes_and_decodes(fake_mystem):
    with MyStem(fake_mystem) as stem:
        results = stem.stemming("Связался с лучшим - подохни как все.")
    assert [r.text for r in results] == ["Связался", "с", "лучшим", "подохни", "как", "все"]
    first = results[0].candidates[0]
    assert first.lemma == "связался"
    assert first.weight == 0.5
    assert first.grammem.part_of_speech is PartOfSpeech.NOUN
    assert first.grammem.get(Case) is Case.NOMINATIVE


def test_stemming_survives_worker_death(fake_mystem):
    with MyStem(fake_mystem) as stem:
        stem.session.process.kill()
        stem.session.process.wait()
        results = stem.stemming("мама мыла раму")
        assert [r.text for r in results] == ["мама", "мыла", "раму"]
        assert stem.session.restarts == 1


def test_garbage_response_is_empty_result(fake_mystem, monkeypatch):
    monkeypatch.setenv("FAKE_MYSTEM_RESPONSE", "oops")
    with MyStem(fake_mystem) as stem:
        assert stem.stemming("мама") == []


def test_unknown_tag_strict_and_lenient(fake_mystem, monkeypatch):
    bad = [{"analysis": [{"lex": "мама", "gr": "S,zzz=nom"}], "text": "мама"}]
    monkeypatch.setenv("FAKE_MYSTEM_RESPONSE", json.dumps(bad, ensure_ascii=False))
    with MyStem(fake_mystem) as stem:
        with pytest.raises(GrammemError):
            stem.stemming("мама")
    with MyStem(fake_mystem, strict=False) as stem:
        results = stem.stemming("мама")
        assert results[0].candidates == ()
        assert len(stem.warnings) == 1


def test_spawn_error(tmp_path):
    with pytest.raises(ProcessSpawnError):
        MyStem(str(tmp_path / "no-such-mystem"))


def test_backend_offsets_and_sentences(fake_mystem):
    text = "Мама мыла раму. Папа спал!"
    with MyStem(fake_mystem, strict=False) as stem:
        result = MystemBackend(stem).analyze(text)
    assert result.backend == "mystem"
    assert [t.text for t in result.tokens] == ["Мама", "мыла", "раму", "Папа", "спал"]
    for tok in result.tokens:
        assert text[tok.start:tok.end] == tok.text
        assert tok.pos == "NOUN"
        assert tok.feats["Case"] == "nom"
        assert tok.feats["mystem"] == "S,inan,f,nom,sg"
    assert len(result.sentences) == 2
    assert result.warnings == []


def test_backend_reports_unlocated_tokens(fake_mystem):
    text = "Из-за дождя"
    with MyStem(fake_mystem, strict=False) as stem:
        result = MystemBackend(stem).analyze(text)
    glued = result.tokens[0]
    assert glued.text == "Изза"
    assert glued.start == glued.end == 0
    assert any("Изза" in w for w in result.warnings)
    assert text[result.tokens[1].start:result.tokens[1].end] == "дождя"


@pytest.mark.skipif(shutil.which("mystem") is None, reason="mystem is not installed")
def test_real_mystem():
    with MyStem() as stem:
        results = stem.stemming("Связался с лучшим - подохни как все.")
    lemmas = {r.text: r.best().lemma for r in results if r.candidates}
    assert lemmas["Связался"] == "связываться"
    assert lemmas["подохни"] == "подыхать"


def test_invalid_utf8_response_is_empty_result(fake_mystem, monkeypatch):
    monkeypatch.setenv("FAKE_MYSTEM_RESPONSE_HEX", b'[{"analysis":[],"text":"\xff\xfe"}]'.hex())
    with MyStem(fake_mystem) as stem:
        pid = stem.session.pid
        assert stem.stemming("мама") == []
        assert stem.stemming("папа") == []
        assert stem.session.pid == pid
        assert stem.session.restarts == 0


def test_closed_input_pipe_restarts_and_retries(fake_mystem, tmp_path, monkeypatch, caplog):
    marker = tmp_path / "stdin-closed"
    monkeypatch.setenv("FAKE_MYSTEM_CLOSE_STDIN", str(marker))
    with MyStem(fake_mystem) as stem:
        deadline = time.monotonic() + 10
        while not marker.exists() and time.monotonic() < deadline:
            time.sleep(0.01)
        assert marker.exists()
        old = stem.session.process
        assert old.poll() is None

        with caplog.at_level(logging.WARNING, logger="morphstem.core.process.session"):
            results = stem.stemming("мама")

        assert [r.text for r in results] == ["мама"]
        assert stem.session.restarts == 1
        assert stem.session.pid != old.pid
        assert old.poll() is not None
        assert "Не удалось отправить запрос" in caplog.text


def test_warnings_cleared_when_exchange_fails(fake_mystem, tmp_path):
    with MyStem(fake_mystem, strict=False) as stem:
        stem.warnings = ["старое предупреждение"]
        stem.session.process.kill()
        stem.session.process.wait()
        stem.session.executable = str(tmp_path / "no-such-mystem")
        with pytest.raises(ProcessSpawnError):
            stem.stemming("мама")
        assert stem.warnings == []
