import pytest

from aasidgen.documents import DocumentIdGenerator
from aasidgen.idshort import normalize_id_short


def test_document_ids_count_up_from_default_seed():
    generator = DocumentIdGenerator()
    assert [generator.next_id() for _ in range(3)] == ["64879470", "64879471", "64879472"]


def test_document_ids_are_zero_padded():
    assert DocumentIdGenerator(7).next_id() == "00000007"


def test_create_skips_empty_documents():
    generator = DocumentIdGenerator(10)
    assert generator.create(None, "  ", "") is None
    assert generator.create("Manual", None, None) == "00000010"
    assert generator.create(None, None, "docs/manual.pdf") == "00000011"


def test_generators_do_not_share_state():
    first = DocumentIdGenerator(1)
    first.next_id()
    assert DocumentIdGenerator(1).next_id() == "00000001"


def test_negative_seed_rejected():
    with pytest.raises(ValueError):
        DocumentIdGenerator(-1)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, "Unnamed"),
        ("   ", "Unnamed"),
        ("___", "Unnamed"),
        ("Motor1", "Motor1"),
        (" Max. temperature ", "Max_temperature"),
        ("a--b__c", "a_b_c"),
        ("2nd stage", "_2nd_stage"),
        ("정격 전압", "정격_전압"),
        ("x²", "x"),
        ("½ inch", "inch"),
        ("Ⅻ", "Unnamed"),
        ("٣ phase", "_٣_phase"),
    ],
)
def test_normalize_id_short(raw, expected):
    assert normalize_id_short(raw) == expected
