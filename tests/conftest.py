from __future__ import annotations

import json
from pathlib import Path

import pytest


def _write(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def write_file():
    """Return a helper writing UTF-8 text files, creating parents."""
    return _write


@pytest.fixture
def lang_dir(tmp_path: Path) -> Path:
    """A small Laravel-style lang directory."""
    root = tmp_path / "lang"
    _write(
        root,
        "en/auth.php",
        "<?php\n\nreturn [\n"
        "    'throttle' => 'Too many login attempts.',\n"
        "    'failed' => 'These credentials do not match our records.',\n"
        "];\n",
    )
    _write(
        root,
        "en/validation.php",
        "<?php\n\nreturn [\n"
        "    'required' => 'The :attribute field is required.',\n"
        "    'custom' => ['email' => ['unique' => 'Taken', 'email' => 'Invalid']],\n"
        "];\n",
    )
    _write(
        root,
        "fr/validation.php",
        "<?php return ['required' => 'Le champ :attribute est obligatoire.'];\n",
    )
    _write(
        root,
        "en.json",
        json.dumps({"Welcome": "Welcome", "Log in": "Log in"}),
    )
    _write(
        root,
        "vendor/acme/en/messages.php",
        "<?php return ['hello' => 'Hello from Acme'];\n",
    )
    _write(root, "en/README.txt", "not a message file")
    _write(root, ".git/config.php", "<?php return ['hidden' => true];")
    return root
