import unittest
from datetime import date

from patient_client.formatting import (
    calculate_age,
    capitalize_words,
    format_confidence,
    format_date,
    format_phone_number,
    get_initials,
    truncate_string,
)
from patient_client.forms import append_item, remove_item_at, validate_patient_form


class PatientFormTest(unittest.TestCase):

    def test_valid_form(self):
        self.assertEqual(validate_patient_form({"firstName": "Ann", "lastName": "Lee", "email": "a@x.com"}), {})

    def test_required_fields(self):
        errors = validate_patient_form({"firstName": "  ", "lastName": "", "email": ""})
        self.assertEqual(errors, {
            "firstName": "First name is required",
            "lastName": "Last name is required",
            "email": "Email is required",
        })

    def test_invalid_email(self):
        errors = validate_patient_form({"firstName": "Ann", "lastName": "Lee", "email": "ann@localhost"})
        self.assertEqual(errors, {"email": "Email is invalid"})

    def test_append_item(self):
        allergies = ["Latex"]
        updated = append_item(allergies, "  Penicillin ")
        self.assertEqual(updated, ["Latex", "Penicillin"])
        self.assertEqual(allergies, ["Latex"])
        self.assertEqual(append_item(updated, "   "), updated)
        self.assertEqual(append_item(None, "Aspirin"), ["Aspirin"])

    def test_remove_item_at(self):
        medications = ["A", "B", "C"]
        self.assertEqual(remove_item_at(medications, 1), ["A", "C"])
        self.assertEqual(medications, ["A", "B", "C"])
        with self.assertRaises(IndexError):
            remove_item_at(medications, 3)
        with self.assertRaises(IndexError):
            remove_item_at(medications, -1)


class FormattingTest(unittest.TestCase):

    def test_format_date(self):
        self.assertEqual(format_date("2025-04-15"), "April 15, 2025")
        self.assertEqual(format_date("2025-04-05T10:00:00Z"), "April 5, 2025")
        self.assertEqual(format_date(date(2024, 12, 1)), "December 1, 2024")
        self.assertEqual(format_date(""), "N/A")
        self.assertEqual(format_date("yesterday"), "Invalid date")

    def test_format_phone_number(self):
        self.assertEqual(format_phone_number("555-123-4567"), "(555) 123-4567")
        self.assertEqual(format_phone_number("15551234567"), "+1 (555) 123-4567")
        self.assertEqual(format_phone_number("12345"), "12345")
        self.assertEqual(format_phone_number(None), "")

    def test_truncate_string(self):
        self.assertEqual(truncate_string("short"), "short")
        self.assertEqual(truncate_string("abcdef", 3), "abc...")
        self.assertEqual(truncate_string(None), "")

    def test_capitalize_words(self):
        self.assertEqual(capitalize_words("mARY ann lee"), "Mary Ann Lee")

    def test_get_initials(self):
        self.assertEqual(get_initials("ann", "lee"), "AL")
        self.assertEqual(get_initials("ann", ""), "A")
        self.assertEqual(get_initials("", None), "??")

    def test_calculate_age(self):
        today = date(2025, 4, 15)
        self.assertEqual(calculate_age("1980-04-15", today=today), 45)
        self.assertEqual(calculate_age("1980-04-16", today=today), 44)
        self.assertIsNone(calculate_age("", today=today))
        self.assertIsNone(calculate_age("not a date", today=today))

    def test_format_confidence(self):
        self.assertEqual(format_confidence(0.873), "87%")
        self.assertEqual(format_confidence(None), "N/A")


if __name__ == "__main__":
    unittest.main()
