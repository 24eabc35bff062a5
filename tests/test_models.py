"""Unit tests for value models."""
import pytest

from emojikit.models import (
    EmojiRecord,
    ExtractedEmoji,
    SkinTone,
    create_emoji_record,
)
from samples import WAVE, GRINNING, LIGHT, DARK


class TestSkinTone:
    """Tests for the SkinTone enumeration."""

    def test_five_tones_in_range(self):
        """Tones cover U+1F3FB..U+1F3FF in order."""
        assert [tone.code_point for tone in SkinTone] == list(range(0x1F3FB, 0x1F400))

    def test_tones_are_ordered(self):
        """Tones compare by code point."""
        assert SkinTone.LIGHT < SkinTone.MEDIUM < SkinTone.DARK
        assert max(SkinTone) is SkinTone.DARK

    def test_unicode(self):
        """unicode returns the single modifier character."""
        assert SkinTone.LIGHT.unicode == LIGHT
        assert SkinTone.DARK.unicode == DARK

    def test_is_skin_tone_code_point(self):
        """Code points inside the range are tones."""
        assert SkinTone.is_skin_tone(0x1F3FB)
        assert SkinTone.is_skin_tone(0x1F3FF)
        assert not SkinTone.is_skin_tone(0x1F3FA)
        assert not SkinTone.is_skin_tone(0x1F400)

    def test_is_skin_tone_string(self):
        """Only a single-code-point string can be a tone."""
        assert SkinTone.is_skin_tone(LIGHT)
        assert not SkinTone.is_skin_tone(LIGHT + LIGHT)
        assert not SkinTone.is_skin_tone(WAVE + LIGHT)
        assert not SkinTone.is_skin_tone("")
        assert not SkinTone.is_skin_tone("a")

    def test_from_unicode(self):
        """from_unicode maps modifier strings back to members."""
        assert SkinTone.from_unicode(DARK) is SkinTone.DARK
        assert SkinTone.from_unicode(WAVE) is None


class TestEmojiRecord:
    """Tests for EmojiRecord."""

    def test_equality_by_sequence_only(self):
        """Records with the same sequence are equal regardless of metadata."""
        first = create_emoji_record(WAVE, ["wave"], ["goodbye"], skinnable=True)
        second = create_emoji_record(WAVE, ["hand"], [], skinnable=False)
        assert first == second
        assert hash(first) == hash(second)
        assert first != create_emoji_record(GRINNING)

    def test_is_immutable(self):
        """Records cannot be modified."""
        record = create_emoji_record(WAVE)
        with pytest.raises(AttributeError):
            record.emoji = GRINNING

    def test_aliases_deduplicated(self):
        """Aliases and tags are stored as sets."""
        record = create_emoji_record(WAVE, ["wave", "wave", "hello"], ["a", "a"])
        assert record.aliases == frozenset({"wave", "hello"})
        assert record.tags == frozenset({"a"})

    def test_single_string_alias(self):
        """A bare string is treated as one alias, not as characters."""
        record = create_emoji_record(WAVE, "wave", "goodbye")
        assert record.aliases == frozenset({"wave"})
        assert record.tags == frozenset({"goodbye"})

    def test_code_points(self):
        """code_points exposes the sequence as integers."""
        assert create_emoji_record(WAVE).code_points == (0x1F44B,)

    def test_validate(self):
        """Empty or toned sequences do not validate."""
        assert create_emoji_record(WAVE).validate()
        assert not EmojiRecord(emoji="").validate()
        assert not EmojiRecord(emoji=WAVE + LIGHT).validate()

    def test_dict_round_trip(self):
        """to_dict/from_dict keep every field."""
        record = create_emoji_record(WAVE, ["wave"], ["goodbye"], skinnable=True)
        data = record.to_dict()
        assert data == {"emoji": WAVE, "aliases": ["wave"], "tags": ["goodbye"], "skinnable": True}
        restored = EmojiRecord.from_dict(data)
        assert restored == record
        assert restored.aliases == record.aliases
        assert restored.skinnable is True


class TestExtractedEmoji:
    """Tests for ExtractedEmoji."""

    def test_equality_by_span_only(self):
        """Extractions at the same span are equal."""
        wave = create_emoji_record(WAVE)
        grinning = create_emoji_record(GRINNING)
        first = ExtractedEmoji(emoji=WAVE, start=0, end=2, detail=wave)
        second = ExtractedEmoji(emoji=GRINNING, start=0, end=2, detail=grinning)
        assert first == second
        assert hash(first) == hash(second)
        assert first != ExtractedEmoji(emoji=WAVE, start=2, end=4, detail=wave)
