from monkey.errors import IllegalCharacterError, LexerError


class TestLexerError:
    def test_basic(self):
        err = LexerError("something broke")
        assert str(err) == "something broke"
        assert err.cause is None

    def test_with_cause(self):
        cause = ValueError("bad value")
        err = LexerError("wrapper", cause=cause)
        assert err.cause is cause


class TestIllegalCharacterError:
    def test_carries_character_and_position(self):
        err = IllegalCharacterError("@", 4)
        assert err.char == "@"
        assert err.position == 4
        assert str(err) == "Illegal character '@' at offset 4"

    def test_is_lexer_error(self):
        assert isinstance(IllegalCharacterError("@", 0), LexerError)
