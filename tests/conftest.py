"""Pytest configuration and shared fixtures."""
import sys
import os
import pytest

# Add repository root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from emojikit import EmojiProcessor, create_emoji_record, reset_emoji_processor
from emojikit.utils import config as config_module
from samples import (
    WAVE, GRINNING, SMILEY_CAT, SCISSORS, CLIPBOARD, THUMBS_UP, POINT_UP, HEART,
    MAN, WOMAN, GIRL, BOY, FAMILY_MWGB, FAMILY_MWBB, COUPLE_WITH_HEART,
)


# ============================================================================
# Common test fixtures
# ============================================================================

@pytest.fixture(scope="session")
def emoji_records():
    """Small in-memory catalog in load order."""
    return [
        create_emoji_record(WAVE, ["wave"], ["goodbye"], skinnable=True),
        create_emoji_record(GRINNING, ["grinning"], ["smile", "happy"]),
        create_emoji_record(SMILEY_CAT, ["smiley_cat"], ["cat"]),
        create_emoji_record(SCISSORS, ["scissors"], ["cut"]),
        create_emoji_record(CLIPBOARD, ["clipboard"], []),
        create_emoji_record(THUMBS_UP, ["+1", "thumbsup"], ["approve", "ok"], skinnable=True),
        create_emoji_record(POINT_UP, ["point_up"], [], skinnable=True),
        create_emoji_record(HEART, ["heart"], ["love"]),
        create_emoji_record(MAN, ["man"], [], skinnable=True),
        create_emoji_record(WOMAN, ["woman"], [], skinnable=True),
        create_emoji_record(GIRL, ["girl"], [], skinnable=True),
        create_emoji_record(BOY, ["boy"], [], skinnable=True),
        create_emoji_record(FAMILY_MWGB, ["family_man_woman_girl_boy"], ["family"]),
        create_emoji_record(FAMILY_MWBB, ["family_man_woman_boy_boy"], ["family"]),
        create_emoji_record(COUPLE_WITH_HEART, ["couple_with_heart_woman_man"], ["love"]),
    ]


@pytest.fixture(scope="session")
def processor(emoji_records):
    """Processor over the sample catalog."""
    return EmojiProcessor(emoji_records, alias_policy="last")


@pytest.fixture
def clean_config():
    """Drop cached configuration before and after the test."""
    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture
def clean_shared_processor():
    """Drop the shared processor before and after the test."""
    reset_emoji_processor()
    yield
    reset_emoji_processor()
