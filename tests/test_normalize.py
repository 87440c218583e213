from internmatch.normalize import normalize


def test_lowercases_and_trims():
    assert normalize("  B.Tech ") == "b.tech"


def test_none_is_empty():
    assert normalize(None) == ""


def test_keeps_inner_whitespace_and_punctuation():
    assert normalize(" Node.js  Dev ") == "node.js  dev"


def test_non_strings_are_stringified():
    assert normalize(42) == "42"
