from banglish_search.phonetic import HALANT, KAR_MAP, SYMBOL_MAP, VOWEL_KEYS, match_symbol, translate


def test_symbol_tables_cover_all_vowels():
    assert VOWEL_KEYS == {"a", "A", "e", "E", "i", "I", "o", "O", "u", "U", "y", "Y", "ri", "oo", "oi", "ou"}
    for key in VOWEL_KEYS:
        assert key in SYMBOL_MAP
        assert key in KAR_MAP


def test_independent_vowel_at_start():
    assert translate("a") == "আ"
    assert translate("A") == "অ"
    assert translate("ami") == "আমি"


def test_dependent_vowel_after_consonant():
    assert translate("ka") == "কা"
    assert translate("ki") == "কি"
    assert translate("kou") == "কৌ"


def test_inherent_vowel_has_no_sign():
    assert translate("kA") == "ক"
    assert translate("kAbita") == "কবিতা"


def test_longest_match_wins():
    assert match_symbol("chh", 0) == ("chh", 3)
    assert translate("chh") == "ছ"
    assert translate("chhobi") == "ছোবি"
    assert translate("kha") == "খা"


def test_adjacent_consonants_form_conjunct():
    assert translate("kt") == "ক" + HALANT + "ত"
    assert translate("bangla") == "বাঙ্লা"


def test_cluster_symbol():
    assert translate("x") == "ক্স"
    assert translate("kx") == "ক" + HALANT + "ক্স"


def test_vowel_after_space_is_independent():
    assert translate("k a") == "ক আ"
    assert translate("amar sonar bangla") == "আমার সোনার বাঙ্লা"


def test_unmapped_character_breaks_conjunct():
    assert translate("k-t") == "ক-ত"
    assert translate("k1") == "ক1"


def test_empty_and_non_ascii_pass_through():
    assert translate("") == ""
    assert translate("বাংলা") == "বাংলা"
    assert translate("123 !?") == "123 !?"


def test_translate_is_deterministic():
    assert translate("bongo") == translate("bongo") == "বোঙো"


def test_uppercase_e_has_no_vowel_sign():
    assert translate("kE") == "ক"
    assert translate("E") == "এ"
