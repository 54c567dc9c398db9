from datetime import date

from models import DOCTOR, PATIENT
from models.record import (
    cell_value, create_payload, display_value, get_value, invalid_emails, is_usable,
    missing_required, parse_date, record_id, set_value,
)


def test_patient_blank_record_shape():
    assert PATIENT.blank_record() == {
        "name": "",
        "age": "",
        "gender": "",
        "contactInfo": {"phone": "", "email": ""},
        "address": "",
        "bloodType": "",
        "emergencyContact": "",
        "insuranceDetails": {"provider": "", "policyNumber": "", "expiryDate": ""},
        "medicalHistory": "",
    }


def test_doctor_blank_record_shape():
    blank = DOCTOR.blank_record()
    assert blank["contactInfo"] == {"phone": "", "email": ""}
    assert all(v == "" for k, v in blank.items() if k != "contactInfo")
    assert set(blank) == {
        "name", "specialization", "department", "yearsOfExperience", "contactInfo",
        "licenseNumber", "officeHours", "emergencyContact", "education",
    }


def test_nested_set_leaves_siblings_untouched():
    record = {"contactInfo": {"phone": "111", "email": "a@b.c"}, "name": "X"}
    updated = set_value(record, "contactInfo.phone", "222")
    assert updated["contactInfo"] == {"phone": "222", "email": "a@b.c"}
    assert updated["name"] == "X"
    # input untouched
    assert record["contactInfo"]["phone"] == "111"


def test_nested_set_creates_missing_group():
    assert set_value({}, "insuranceDetails.provider", "Acme") == {"insuranceDetails": {"provider": "Acme"}}


def test_top_level_set():
    assert set_value({"name": "A", "age": 3}, "name", "B") == {"name": "B", "age": 3}


def test_get_value_tolerates_missing_and_malformed_groups():
    assert get_value({}, "contactInfo.phone") == ""
    assert get_value({"contactInfo": None}, "contactInfo.phone") == ""
    assert get_value({"contactInfo": "oops"}, "contactInfo.phone") == ""
    assert get_value({"age": 0}, "age") == 0


def test_missing_required_lists_empty_required_fields():
    record = PATIENT.blank_record()
    record = set_value(record, "name", "Jane")
    missing = [f.path for f in missing_required(PATIENT, record)]
    assert "name" not in missing
    assert "contactInfo.email" in missing
    # optional fields never block submission
    assert "medicalHistory" not in missing
    assert "insuranceDetails.provider" not in missing


def test_zero_is_not_missing():
    record = set_value(DOCTOR.blank_record(), "yearsOfExperience", 0)
    assert "yearsOfExperience" not in [f.path for f in missing_required(DOCTOR, record)]


def test_record_id_and_usability():
    assert record_id(PATIENT, {"_id": "abc"}) == "abc"
    assert record_id(PATIENT, {"name": "no id"}) is None
    assert is_usable({"_id": "1"})
    assert not is_usable({})
    assert not is_usable(None)
    assert not is_usable([{"_id": "1"}])


def test_create_payload_drops_identifier():
    assert create_payload(PATIENT, {"_id": "1", "name": "A"}) == {"name": "A"}


def test_parse_date_accepts_timestamps():
    assert parse_date("2026-03-31T00:00:00.000Z") == date(2026, 3, 31)
    assert parse_date("2026-03-31") == date(2026, 3, 31)
    assert parse_date("") is None
    assert parse_date("soon") is None
    assert parse_date("2026-13-40") is None


def test_display_fallbacks_for_optional_fields():
    field = PATIENT.field("medicalHistory")
    assert display_value(field, {"medicalHistory": ""}) == "No medical history recorded"
    assert display_value(PATIENT.field("insuranceDetails.provider"), {}) == "N/A"
    assert display_value(PATIENT.field("insuranceDetails.expiryDate"), {}) == "N/A"


def test_display_formats_dates():
    record = {"insuranceDetails": {"expiryDate": "2026-03-31T00:00:00.000Z"}}
    assert display_value(PATIENT.field("insuranceDetails.expiryDate"), record) == "Mar 31, 2026"


def test_missing_required_value_displays_empty():
    assert display_value(DOCTOR.field("education"), {"_id": "123", "name": "Dr. A"}) == ""


def test_cell_value_suffix():
    column = DOCTOR.columns[3]
    assert cell_value(column, {"yearsOfExperience": 7}) == "7 years"
    assert cell_value(column, {}) == ""


def test_invalid_emails_flags_malformed_addresses_only():
    record = set_value(PATIENT.blank_record(), "contactInfo.email", "not-an-email")
    assert [f.path for f in invalid_emails(PATIENT, record)] == ["contactInfo.email"]

    for bad in ("a b@example.com", "jane@", "@example.com", "jane@example..com"):
        assert invalid_emails(DOCTOR, set_value({}, "contactInfo.email", bad)), bad


def test_invalid_emails_accepts_addresses_and_leaves_blanks_alone():
    for good in ("jane@example.com", "dr.a+work@mail.hospital.org", "x@localhost"):
        assert invalid_emails(DOCTOR, set_value({}, "contactInfo.email", good)) == []
    assert invalid_emails(PATIENT, PATIENT.blank_record()) == []
