import random
from pathlib import Path

import pytest
from tuipe.core.errors import WordListError
from tuipe.practice import (
    WordGenerator,
    filter_for_lang,
    import_word_list,
    list_languages,
    load_words,
    write_word_list,
)

WORDS = ["alpha", "beta", "gamma", "delta"]


class TestWordGenerator:
    def test_generate_plain_words(self):
        gen = WordGenerator(random.Random(1))
        out = gen.generate(WORDS, 20, caps_pct=0.0, punct_pct=0.0, punct_set=".")
        assert len(out) == 20
        assert set(out) <= set(WORDS)

    def test_generate_always_decorated(self):
        gen = WordGenerator(random.Random(2))
        out = gen.generate(WORDS, 10, caps_pct=1.0, punct_pct=1.0, punct_set="!")
        for word in out:
            assert word[0].isupper()
            assert word.endswith("!")
            assert word[:-1].lower() in WORDS

    def test_empty_word_list(self):
        gen = WordGenerator(random.Random(3))
        assert gen.generate([], 5, 0.5, 0.5, ".") == []
        assert gen.generate_weighted([], 5, 0.5, 0.5, ".", {"a"}, 2.0) == []

    def test_weighted_prefers_weak_chars(self):
        gen = WordGenerator(random.Random(4))
        words = ["zzz", "aaa"]
        out = gen.generate_weighted(words, 500, 0.0, 0.0, ".", {"z"}, 10.0)
        # "zzz" weighs 31, "aaa" weighs 1
        assert out.count("zzz") > out.count("aaa") * 5

    def test_weighted_zero_factor_keeps_every_word_possible(self):
        gen = WordGenerator(random.Random(5))
        out = gen.generate_weighted(["x", "y"], 200, 0.0, 0.0, ".", {"x"}, 0.0)
        assert set(out) == {"x", "y"}


class TestWordLists:
    def test_english_filter(self):
        keep = filter_for_lang("EN")
        assert keep("hello")
        assert not keep("Hello")
        assert not keep("don't")
        assert not keep("café")
        assert not keep("")
        assert filter_for_lang("de")("straße")

    def test_load_words_skips_blank_lines(self, tmp_path: Path):
        f = tmp_path / "en.txt"
        f.write_text("one\n\n  two  \nthree\n", encoding="utf-8")
        assert load_words(f) == ["one", "two", "three"]

    def test_load_words_errors(self, tmp_path: Path):
        with pytest.raises(WordListError) as exc:
            load_words(tmp_path / "missing.txt")
        assert exc.value.code == "wordlist_unreadable"

        empty = tmp_path / "empty.txt"
        empty.write_text("\n\n", encoding="utf-8")
        with pytest.raises(WordListError) as exc:
            load_words(empty)
        assert exc.value.code == "wordlist_empty"

    def test_list_languages(self, tmp_path: Path):
        for name in ("fr.txt", "en.txt", "ATTRIBUTION.txt", "LICENSE.txt", "notes.md"):
            (tmp_path / name).write_text("x\n", encoding="utf-8")
        (tmp_path / "de.txt").mkdir()
        assert list_languages(tmp_path) == ["en", "fr"]
        assert list_languages(tmp_path / "absent") == []

    def test_write_word_list_replaces_file(self, tmp_path: Path):
        target = tmp_path / "lists" / "en.txt"
        write_word_list(target, ["a", "b"])
        write_word_list(target, ["c"])
        assert target.read_text(encoding="utf-8") == "c\n"
        assert [p.name for p in target.parent.iterdir()] == ["en.txt"]

    def test_import_filters_dedupes_and_limits(self, tmp_path: Path):
        source = tmp_path / "raw.txt"
        source.write_text("the\nThe\nof\nthe\nand\nx-ray\nto\n", encoding="utf-8")
        target = tmp_path / "wl" / "en.txt"

        assert import_word_list(source, target, "en", size=3) == 3
        assert load_words(target) == ["the", "of", "and"]

    def test_import_refuses_overwrite_without_force(self, tmp_path: Path):
        source = tmp_path / "raw.txt"
        source.write_text("one\ntwo\n", encoding="utf-8")
        target = tmp_path / "en.txt"
        target.write_text("old\n", encoding="utf-8")

        with pytest.raises(WordListError) as exc:
            import_word_list(source, target, "en")
        assert exc.value.code == "wordlist_exists"

        assert import_word_list(source, target, "en", force=True) == 2
        assert load_words(target) == ["one", "two"]

    def test_import_with_no_usable_words(self, tmp_path: Path):
        source = tmp_path / "raw.txt"
        source.write_text("Ünïcode\nUPPER\n", encoding="utf-8")
        with pytest.raises(WordListError):
            import_word_list(source, tmp_path / "en.txt", "en")
