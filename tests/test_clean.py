"""
Test suite for the name cleaner.
"""

import sys
from pathlib import Path

# Add the parent directory to path to import nameparse
sys.path.insert(0, str(Path(__file__).parent.parent))

from nameparse.english_names import clean

# (input, expected)
CLEAN_TEST_CASES = [
    ("   Bad Na89me!", "Bad Name"),
    ("MR AB SMITH", "MR AB SMITH"),
    ("M/S AB SMITH-JONES & CO.", "M/S AB SMITH-JONES & CO."),
    ("MR\tAB\n SMITH  ", "MR AB SMITH"),
    ("MR AB 9 SMITH", "MR AB SMITH"),
    ("O’BRIEN", "O'BRIEN"),  # curly apostrophe
    ("JOSÉ GARCÍA", "JOSE GARCIA"),
    ("Zoë Brontë", "Zoe Bronte"),
    ("(MR) AB SMITH #42", "MR AB SMITH"),
    ("12345", ""),
    ("", ""),
]


def test_clean():
    """Test cleaning with expected outputs."""
    passed = 0
    failed = 0

    for input_text, expected in CLEAN_TEST_CASES:
        result = clean(input_text)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{input_text}': expected '{expected}', got '{result}'")

    assert failed == 0, f"Clean tests: {failed} failures out of {len(CLEAN_TEST_CASES)} tests"
    print(f"Clean tests: {passed} passed, {failed} failed")


def test_clean_is_idempotent():
    samples = [text for text, _ in CLEAN_TEST_CASES] + [
        "  --  ",
        "Mr. & Mrs.   A.B.   O’Neil-Smith,  Jr.",
        "Ångström Østergaard",
        "MR AB SMITH",
    ]
    for text in samples:
        once = clean(text)
        assert clean(once) == once, f"Not idempotent for '{text}'"
