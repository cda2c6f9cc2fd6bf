from addrspec.utils.encoding import encode, mailto_uri


def test_encode_leaves_plain_addresses_untouched() -> None:
    assert encode("a@b.com") == "a@b.com"


def test_encode_reserved_characters() -> None:
    assert encode("a+b@b.com") == "a%2Bb@b.com"
    assert encode("!#$%&'()*+,/:;=?[]") == "%21%23%24%25%26%27%28%29%2A%2B%2C%2F%3A%3B%3D%3F%5B%5D"


def test_encode_passes_non_ascii_through() -> None:
    assert encode("jörg@bücher.example") == "jörg@bücher.example"


def test_mailto_uri() -> None:
    assert mailto_uri("user?x@[1.2.3.4]") == "mailto:user%3Fx@%5B1.2.3.4%5D"
