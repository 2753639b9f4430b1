import stat
import sys
from pathlib import Path

import pytest

# Minimal stand-in for `mystem -i --format json`: one JSON array per input line.
FAKE_WORKER = r'''
import json
import os
import sys
import time

sys.stdin.reconfigure(encoding="utf-8")
sys.stdout.reconfigure(encoding="utf-8")

args_file = os.environ.get("FAKE_MYSTEM_ARGS")
if args_file:
    with open(args_file, "a", encoding="utf-8") as f:
        f.write(" ".join(sys.argv[1:]) + "\n")

# First worker to see this marker path closes its stdin and hangs.
close_marker = os.environ.get("FAKE_MYSTEM_CLOSE_STDIN")
if close_marker and not os.path.exists(close_marker):
    os.close(0)
    open(close_marker, "w").close()
    time.sleep(30)
    sys.exit(0)

fixed = os.environ.get("FAKE_MYSTEM_RESPONSE")
raw_hex = os.environ.get("FAKE_MYSTEM_RESPONSE_HEX")
for line in sys.stdin:
    if raw_hex is not None:
        sys.stdout.buffer.write(bytes.fromhex(raw_hex) + b"\n")
    elif fixed is not None:
        sys.stdout.write(fixed + "\n")
    else:
        out = [
            {"analysis": [{"lex": w.lower(), "wt": 0.5, "gr": "S,inan,f=nom,sg"}], "text": w}
            for w in line.split()
        ]
        sys.stdout.write(json.dumps(out, ensure_ascii=False) + "\n")
    sys.stdout.flush()
'''


@pytest.fixture
def fake_mystem(tmp_path: Path) -> str:
    script = tmp_path / "fake_mystem.py"
    script.write_text(FAKE_WORKER, encoding="utf-8")
    wrapper = tmp_path / "mystem"
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n', encoding="utf-8")
    wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(wrapper)
