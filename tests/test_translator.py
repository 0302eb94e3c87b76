"""Tests for encode/decode in both policies."""

import logging
import string
from concurrent.futures import ThreadPoolExecutor

import pytest

import morsetranslator
from morsetranslator.codec import (
    DiagnosticKind,
    DuplicatePatternError,
    MorseCodec,
    TranslationError,
)


class TestEncode:
    def test_sos(self, codec):
        assert codec.encode("SOS") == "... --- ... "

    def test_case_insensitive(self, codec):
        assert codec.encode("sos") == codec.encode("SOS")
        assert codec.encode("HeLLo") == codec.encode("HELLO")

    def test_word_separator(self, codec):
        morse = codec.encode("HI THERE")
        assert morse == ".... .. / - .... . .-. . "
        assert " / " in morse
        assert "  " not in morse

    def test_unmapped_dropped(self, codec):
        assert codec.encode("A1B") == codec.encode("AB")
        assert codec.encode("A,B!") == ".- -... "

    def test_empty(self, codec):
        assert codec.encode("") == ""

    def test_fully_unmapped(self, codec):
        assert codec.encode("123!?") == ""

    def test_output_alphabet(self, codec):
        morse = codec.encode("The quick brown fox, 42 jumps!")
        assert set(morse) <= {".", "-", " ", "/"}

    def test_repeated_spaces_kept(self, codec):
        assert codec.encode("A  B") == ".- / / -... "

    def test_encode_letter(self, codec):
        assert codec.encode_letter("q") == "--.-"
        assert codec.encode_letter("7") is None


class TestDecode:
    def test_sos(self, codec):
        assert codec.decode("... --- ...") == "SOS"

    def test_words(self, codec):
        assert codec.decode(".... .. / - .... . .-. .") == "HI THERE"

    def test_empty(self, codec):
        assert codec.decode("") == ""
        assert codec.decode("   ") == ""

    def test_surrounding_whitespace_trimmed(self, codec):
        assert codec.decode("  ... --- ...  \n") == "SOS"

    def test_unrecognized_trailing_symbol(self, codec):
        # H has no children, the extra dash is ignored
        assert codec.decode("....- ...") == "HS"

    def test_overlong_token(self, codec):
        assert codec.decode("...... ---") == "HO"

    def test_foreign_token_is_blank(self, codec):
        assert codec.decode("x .-") == " A"

    def test_doubled_space_is_blank(self, codec):
        assert codec.decode(".-  -") == "A T"

    def test_bad_token_does_not_stop_rest(self, codec):
        assert codec.decode("... abc --- ....-- ...") == "S OHS"

    def test_prefix_only_node_is_blank(self):
        codec = MorseCodec({"A": ".-", "B": "-..."})
        assert codec.decode("- .-") == " A"

    def test_decode_token(self, codec):
        assert codec.decode_token("--..") == "Z"
        assert codec.decode_token("") == " "


class TestRoundTrip:
    @pytest.mark.parametrize("letter", list(string.ascii_uppercase))
    def test_every_letter(self, codec, letter):
        assert codec.decode(codec.encode(letter)) == letter

    def test_hello_world(self, codec):
        assert codec.decode(codec.encode("HELLO WORLD")) == "HELLO WORLD"

    def test_lowercase_comes_back_upper(self, codec):
        assert codec.decode(codec.encode("hello world")) == "HELLO WORLD"


class TestReports:
    def test_clean_encode(self, codec):
        result = codec.encode_with_report("SOS")
        assert result.ok
        assert result.text == "... --- ... "

    def test_unmapped_character(self, codec):
        result = codec.encode_with_report("A1B")
        assert result.text == ".- -... "
        assert len(result.diagnostics) == 1
        item = result.diagnostics[0]
        assert item.kind is DiagnosticKind.UNMAPPED_CHARACTER
        assert item.position == 1
        assert item.token == "1"

    def test_clean_decode(self, codec):
        result = codec.decode_with_report("... --- ...")
        assert result.ok
        assert result.text == "SOS"

    def test_unknown_symbol(self, codec):
        result = codec.decode_with_report(".-x -")
        assert result.text == "AT"
        assert [d.kind for d in result.diagnostics] == [DiagnosticKind.UNKNOWN_SYMBOL]
        assert result.diagnostics[0].position == 2
        assert result.diagnostics[0].token == ".-x"

    def test_invalid_token(self, codec):
        result = codec.decode_with_report("... x ---")
        assert result.text == "S O"
        assert len(result.by_kind(DiagnosticKind.UNKNOWN_SYMBOL)) == 1
        invalid = result.by_kind(DiagnosticKind.INCOMPLETE_OR_INVALID_TOKEN)
        assert len(invalid) == 1
        assert invalid[0].position == 4

    def test_positions_account_for_leading_whitespace(self, codec):
        result = codec.decode_with_report("  x")
        assert result.diagnostics[0].position == 2

    def test_empty_token_reported(self, codec):
        result = codec.decode_with_report(".-  -")
        assert [d.kind for d in result.diagnostics] == [DiagnosticKind.INCOMPLETE_OR_INVALID_TOKEN]
        assert result.diagnostics[0].position == 3

    def test_reports_never_raise_in_strict_mode(self, strict_codec):
        result = strict_codec.decode_with_report("x")
        assert not result.ok
        assert result.text == " "


class TestStrictMode:
    def test_valid_input_passes(self, strict_codec):
        assert strict_codec.encode("SOS") == "... --- ... "
        assert strict_codec.decode("... --- ...") == "SOS"

    def test_encode_raises(self, strict_codec):
        with pytest.raises(TranslationError) as exc:
            strict_codec.encode("A1")
        assert exc.value.result.text == ".- "
        assert exc.value.result.diagnostics[0].kind is DiagnosticKind.UNMAPPED_CHARACTER

    def test_decode_raises(self, strict_codec):
        with pytest.raises(TranslationError) as exc:
            strict_codec.decode("... ....- ...")
        assert exc.value.result.text == "SHS"

    def test_empty_input_passes(self, strict_codec):
        assert strict_codec.encode("") == ""
        assert strict_codec.decode("") == ""


class TestConstruction:
    def test_duplicate_pattern_aborts(self):
        with pytest.raises(DuplicatePatternError):
            MorseCodec({"A": ".-", "B": "-", "C": ".-"})

    def test_instances_do_not_share_trie(self):
        assert MorseCodec().trie is not MorseCodec().trie

    def test_custom_table(self):
        codec = MorseCodec({"A": ".", "B": "-"})
        assert codec.encode("ABC") == ". - "
        assert codec.decode(". -") == "AB"


class TestModuleLevel:
    def test_encode(self):
        assert morsetranslator.encode("SOS") == "... --- ... "

    def test_decode(self):
        assert morsetranslator.decode("... --- ...") == "SOS"


class TestLogging:
    def test_diagnostics_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="morsetranslator.codec.translator")
        MorseCodec().decode("x")
        assert "decode: 2 diagnostic(s)" in caplog.text

    def test_logging_disabled(self, caplog):
        caplog.set_level(logging.DEBUG, logger="morsetranslator.codec.translator")
        MorseCodec(log_diagnostics=False).decode("x")
        assert "diagnostic" not in caplog.text


class TestConcurrency:
    def test_shared_codec_across_threads(self, codec):
        words = ["SOS", "HELLO WORLD", "MORSE", "TRIE"] * 25
        with ThreadPoolExecutor(max_workers=8) as pool:
            decoded = list(pool.map(lambda w: codec.decode(codec.encode(w)), words))
        assert decoded == words
