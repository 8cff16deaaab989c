import unittest

from portfolio.common.errors import ValidationError
from portfolio.common.validation import validate_payload
from portfolio.dto.contact_form_request_dto import ContactFormCreateDto


class TestValidatePayload(unittest.TestCase):
    def test_dto_instance_returned_as_is(self):
        dto = ContactFormCreateDto(name="A", email="a@example.com", message="Hi")

        self.assertIs(validate_payload(ContactFormCreateDto, dto), dto)

    def test_mapping_with_camel_or_snake_keys(self):
        dto = validate_payload(
            ContactFormCreateDto,
            {"name": " A ", "email": "a@example.com", "message": "Hi", "subject": "S"},
        )

        self.assertEqual(dto.name, " A ")
        self.assertEqual(dto.subject, "S")

    def test_invalid_mapping_raises_domain_error(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_payload(ContactFormCreateDto, {"name": "A", "email": "bad"})

        fields = {error["field"] for error in ctx.exception.errors}
        self.assertEqual(fields, {"email", "message"})
        self.assertTrue(str(ctx.exception).startswith("Validation Error: "))

    def test_domain_validation_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            validate_payload(ContactFormCreateDto, {})

    def test_unknown_field_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_payload(
                ContactFormCreateDto,
                {"name": "A", "email": "a@example.com", "message": "Hi", "phone": "1"},
            )

        self.assertEqual(ctx.exception.errors[0]["field"], "phone")


if __name__ == "__main__":
    unittest.main()
