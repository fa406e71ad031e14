from pathlib import Path

from localekit.libs.filesystem import iter_files, locale_filename


def test_locale_filename_inserts_before_extension():
    assert locale_filename("public/js/messages.js", "en") == Path(
        "public/js/messages-en.js"
    )


def test_locale_filename_keeps_inner_dots():
    assert locale_filename("dist/messages.min.js", "pt_BR") == Path(
        "dist/messages.min-pt_BR.js"
    )


def test_locale_filename_without_extension():
    assert locale_filename("dist/messages", "fr") == Path("dist/messages-fr")


def test_iter_files_sorted_and_relative(tmp_path):
    for rel in ("fr/b.php", "en/a.php", "en/sub/c.json", "en.json"):
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")

    files = list(iter_files(tmp_path))

    assert files == [
        Path("en/a.php"),
        Path("en/sub/c.json"),
        Path("en.json"),
        Path("fr/b.php"),
    ]


def test_iter_files_skips_hidden(tmp_path):
    (tmp_path / ".cache").mkdir()
    (tmp_path / ".cache" / "x.php").write_text("", encoding="utf-8")
    (tmp_path / ".hidden.php").write_text("", encoding="utf-8")
    (tmp_path / "en").mkdir()
    (tmp_path / "en" / "ok.php").write_text("", encoding="utf-8")

    assert list(iter_files(tmp_path)) == [Path("en/ok.php")]
