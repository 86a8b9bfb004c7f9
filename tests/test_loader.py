import pytest

from bombo.core.errors import EmptyParticipantPool, SourceUnavailable, UsageError
from bombo.services.loader import load_participants, load_participants_from_csv, read_pool


def test_load_keeps_order(tmp_path):
    p = tmp_path / "people.txt"
    p.write_text("Ana\nLuis\nSara\n", encoding="utf-8")
    assert load_participants(str(p)) == ["Ana", "Luis", "Sara"]


def test_load_is_repeatable(tmp_path):
    p = tmp_path / "people.txt"
    p.write_text("Ana\nLuis\nSara\nAna\n", encoding="utf-8")
    assert load_participants(str(p)) == load_participants(str(p))


def test_blank_lines_are_ignored(tmp_path):
    dense = tmp_path / "dense.txt"
    sparse = tmp_path / "sparse.txt"
    dense.write_text("Ana\nLuis\nSara\n", encoding="utf-8")
    sparse.write_text("\nAna\n\n\nLuis\n\nSara\n\n", encoding="utf-8")
    assert load_participants(str(sparse)) == load_participants(str(dense))


def test_crlf_matches_lf(tmp_path):
    unix = tmp_path / "unix.txt"
    win = tmp_path / "win.txt"
    unix.write_bytes(b"Ana\nLuis\nSara")
    win.write_bytes(b"Ana\r\nLuis\r\n\r\nSara\r\n")
    loaded = load_participants(str(win))
    assert loaded == load_participants(str(unix))
    assert all("\r" not in name for name in loaded)


def test_other_whitespace_is_kept(tmp_path):
    p = tmp_path / "people.txt"
    p.write_text("  Ana  \n\tLuis\n", encoding="utf-8")
    assert load_participants(str(p)) == ["  Ana  ", "\tLuis"]


def test_duplicates_are_kept(tmp_path):
    p = tmp_path / "people.txt"
    p.write_text("Ana\nAna\nLuis\n", encoding="utf-8")
    assert load_participants(str(p)) == ["Ana", "Ana", "Luis"]


def test_long_lines_are_not_truncated(tmp_path):
    name = "x" * 10000
    p = tmp_path / "people.txt"
    p.write_text(f"{name}\nAna\n", encoding="utf-8")
    assert load_participants(str(p)) == [name, "Ana"]


def test_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(SourceUnavailable) as exc:
        load_participants(str(missing))
    assert "missing.txt" in str(exc.value)


def test_directory_is_unavailable(tmp_path):
    with pytest.raises(SourceUnavailable):
        load_participants(str(tmp_path))


def test_bad_encoding(tmp_path):
    p = tmp_path / "people.txt"
    p.write_bytes(b"Ana\n\xff\xfe\xfa\n")
    with pytest.raises(SourceUnavailable) as exc:
        load_participants(str(p), encoding="utf-8")
    assert "utf-8" in str(exc.value)


def test_blank_only_file_is_empty_pool(tmp_path):
    p = tmp_path / "blank.txt"
    p.write_text("\n\r\n\n", encoding="utf-8")
    assert load_participants(str(p)) == []
    with pytest.raises(EmptyParticipantPool) as exc:
        read_pool(str(p))
    assert "blank.txt" in str(exc.value)


def test_csv_column(tmp_path):
    p = tmp_path / "people.csv"
    p.write_text("nombre,email\nAna,ana@x.com\n,nadie@x.com\n  Luis ,luis@x.com\n", encoding="utf-8")
    assert load_participants_from_csv(str(p), "nombre") == ["Ana", "Luis"]
    assert load_participants_from_csv(str(p), "Nombre") == ["Ana", "Luis"]


def test_csv_custom_separator(tmp_path):
    p = tmp_path / "people.csv"
    p.write_text("nombre;email\nAna;ana@x.com\nLuis;luis@x.com\n", encoding="utf-8")
    assert read_pool(str(p), column="nombre", sep=";") == ["Ana", "Luis"]


def test_csv_unknown_column(tmp_path):
    p = tmp_path / "people.csv"
    p.write_text("nombre,email\nAna,ana@x.com\n", encoding="utf-8")
    with pytest.raises(UsageError) as exc:
        load_participants_from_csv(str(p), "name")
    assert "nombre" in str(exc.value)


def test_csv_missing_and_empty(tmp_path):
    with pytest.raises(SourceUnavailable):
        load_participants_from_csv(str(tmp_path / "missing.csv"), "nombre")

    empty = tmp_path / "empty.csv"
    empty.write_bytes(b"")
    with pytest.raises(EmptyParticipantPool):
        read_pool(str(empty), column="nombre")


def test_lone_cr_stays_in_name(tmp_path):
    p = tmp_path / "people.txt"
    p.write_bytes(b"A\rB\nLuis\r\n")
    assert load_participants(str(p)) == ["A\rB", "Luis"]


@pytest.mark.parametrize("content", [
    "nombre,email\nAna,a@x.com\nLuis,l@x.com,extra,more\n",
    '"Ana,a@x.com\n',
])
def test_csv_malformed(tmp_path, content):
    p = tmp_path / "people.csv"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(SourceUnavailable) as exc:
        load_participants_from_csv(str(p), "nombre")
    assert "not valid CSV" in str(exc.value)
