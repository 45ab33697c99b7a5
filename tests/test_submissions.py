"""Tests for contact/sponsor validation and the submission store."""

import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.errors import ErrorKind, InvalidInputError, NotFoundError
from app.models import Base, Contact, Sponsor
from app.schemas.submissions import ContactCreate, SponsorCreate
from app.services.submissions import SubmissionStore, validate_contact, validate_sponsor


class TestValidateContact(unittest.TestCase):
    def test_valid_contact_maps_to_columns(self) -> None:
        fields = validate_contact(
            ContactCreate(name=" Bob ", email="bob@example.com", message=" Hello ")
        )
        self.assertEqual(
            fields, {"full_name": "Bob", "email": "bob@example.com", "message": "Hello"}
        )

    def test_blank_field_rejected(self) -> None:
        with self.assertRaises(InvalidInputError) as ctx:
            validate_contact(ContactCreate(name="Bob", email="bob@example.com", message="  "))
        self.assertEqual(ctx.exception.message, "All fields are required")

    def test_bad_email_rejected(self) -> None:
        for email in ("bob", "bob@example", "bob @example.com", "@example.com"):
            with self.assertRaises(InvalidInputError) as ctx:
                validate_contact(ContactCreate(name="Bob", email=email, message="Hi"))
            self.assertEqual(ctx.exception.message, "Invalid email format")


class TestValidateSponsor(unittest.TestCase):
    def test_support_type_accepts_camel_case_alias(self) -> None:
        body = SponsorCreate.model_validate(
            {
                "name": "Acme",
                "email": "team@acme.io",
                "supportType": "Financial",
                "message": "Happy to help",
            }
        )
        fields = validate_sponsor(body)
        self.assertEqual(fields["support_type"], "Financial")
        self.assertIsNone(fields["phone"])

    def test_blank_phone_becomes_none(self) -> None:
        body = SponsorCreate(
            name="Acme", email="team@acme.io", phone="  ", support_type="Venue", message="x"
        )
        self.assertIsNone(validate_sponsor(body)["phone"])

    def test_missing_support_type_rejected(self) -> None:
        body = SponsorCreate(name="Acme", email="team@acme.io", support_type=" ", message="x")
        with self.assertRaises(InvalidInputError) as ctx:
            validate_sponsor(body)
        self.assertEqual(ctx.exception.message, "Required fields missing")


class TestSubmissionStore(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False)()
        self.contacts = SubmissionStore.contacts(self.db)
        self.sponsors = SubmissionStore.sponsors(self.db)

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def _contact(self, name: str) -> Contact:
        return self.contacts.insert(full_name=name, email=f"{name}@x.com", message="hi")

    def test_insert_assigns_id_and_unread(self) -> None:
        contact = self._contact("first")
        self.assertIsNotNone(contact.id)
        self.assertFalse(contact.is_read)
        self.assertIsNotNone(contact.created_at)

    def test_list_all_is_newest_first(self) -> None:
        ids = [self._contact(n).id for n in ("a", "b", "c")]
        listed = [c.id for c in self.contacts.list_all()]
        self.assertEqual(listed, list(reversed(ids)))

    def test_mark_read(self) -> None:
        contact = self._contact("a")
        self.contacts.mark_read(contact.id)
        self.db.expire_all()
        self.assertTrue(self.db.get(Contact, contact.id).is_read)

    def test_delete(self) -> None:
        contact = self._contact("a")
        self.contacts.delete(contact.id)
        self.assertEqual(self.contacts.list_all(), [])

    def test_unknown_id_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            self.contacts.mark_read(999)
        self.assertEqual(ctx.exception.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(ctx.exception.status_code, 404)
        with self.assertRaises(NotFoundError) as ctx:
            self.sponsors.delete(999)
        self.assertEqual(ctx.exception.message, "Request not found")

    def test_sponsor_round_trip(self) -> None:
        sponsor = self.sponsors.insert(
            name="Acme",
            email="team@acme.io",
            phone=None,
            support_type="Financial",
            message="Count us in",
        )
        listed = self.sponsors.list_all()
        self.assertEqual(len(listed), 1)
        self.assertIsInstance(listed[0], Sponsor)
        self.assertEqual(listed[0].id, sponsor.id)
        self.assertEqual(self.contacts.list_all(), [])


if __name__ == "__main__":
    unittest.main()
