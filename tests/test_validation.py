import unittest
from unittest.mock import AsyncMock, MagicMock
import os
import sys

from bson import ObjectId

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_listing.errors import ReferentialError, ValidationError
from event_listing.models import Booking, Event
from event_listing.services.validation import (
    normalize_event,
    validate_event,
    normalize_booking,
    validate_booking,
)


def make_event(**overrides):
    fields = {
        "title": "  Next.js Conf 2025 ",
        "description": "The annual Next.js conference.",
        "overview": "Talks, workshops and networking.",
        "image": "/images/event1.png",
        "venue": "Moscone Center",
        "location": "San Francisco, CA",
        "date": "2025-10-22",
        "time": "9:30am",
        "mode": "hybrid",
        "audience": "Developers",
        "agenda": ["Keynote", "Workshops"],
        "organizer": "Vercel",
        "tags": ["nextjs", "react"],
    }
    fields.update(overrides)
    return Event.from_fields(fields)


class TestNormalizeEvent(unittest.TestCase):

    def test_new_event_is_normalized(self):
        event = normalize_event(make_event())

        self.assertEqual(event.title, "Next.js Conf 2025")
        self.assertEqual(event.slug, "next-js-conf-2025")
        self.assertEqual(event.date, "2025-10-22T00:00:00.000Z")
        self.assertEqual(event.time, "09:30")
        # Only title is trimmed, other strings are stored as given
        self.assertEqual(event.agenda, ["Keynote", "Workshops"])

    def test_normalizing_twice_keeps_slug_date_and_time(self):
        event = normalize_event(make_event())
        first = (event.slug, event.date, event.time)
        event.id = ObjectId()
        event.mark_persisted()

        normalize_event(event)
        self.assertEqual((event.slug, event.date, event.time), first)

    def test_slug_is_kept_when_title_unchanged(self):
        event = normalize_event(make_event())
        event.id = ObjectId()
        event.mark_persisted()
        # Slug is only derived from the title, a manual edit survives
        event.slug = "custom-slug"

        normalize_event(event)
        self.assertEqual(event.slug, "custom-slug")

    def test_slug_follows_title_change(self):
        event = normalize_event(make_event())
        event.id = ObjectId()
        event.mark_persisted()

        event.title = "React Summit"
        normalize_event(event)
        self.assertEqual(event.slug, "react-summit")

    def test_missing_or_blank_strings_fail(self):
        for name in Event.REQUIRED_STRINGS:
            for bad in (None, "", "   ", 3):
                with self.assertRaises(ValidationError, msg=f"{name}={bad!r}") as ctx:
                    normalize_event(make_event(**{name: bad}))
                self.assertEqual(ctx.exception.field, name)

    def test_empty_or_invalid_lists_fail(self):
        for name in Event.REQUIRED_LISTS:
            for bad in (None, [], "keynote", ["ok", 5]):
                with self.assertRaises(ValidationError, msg=f"{name}={bad!r}") as ctx:
                    normalize_event(make_event(**{name: bad}))
                self.assertEqual(ctx.exception.field, name)

    def test_bad_date_and_time_fail(self):
        with self.assertRaises(ValidationError):
            normalize_event(make_event(date="someday"))
        with self.assertRaises(ValidationError):
            normalize_event(make_event(time="25:00"))


class TestValidateEvent(unittest.TestCase):

    def test_outcome_success(self):
        outcome = validate_event(make_event())
        self.assertTrue(outcome.ok)
        self.assertIsNone(outcome.error)
        self.assertEqual(outcome.unwrap().slug, "next-js-conf-2025")

    def test_outcome_error(self):
        outcome = validate_event(make_event(tags=[]))
        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, ValidationError)
        with self.assertRaises(ValidationError):
            outcome.unwrap()


class TestBookingValidation(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.event_id = ObjectId()
        self.events = MagicMock()
        self.events.find_one = AsyncMock(return_value={"_id": self.event_id})

    def test_normalize_booking_coerces_event_id(self):
        booking = normalize_booking(Booking(event_id=str(self.event_id), email=" a@b.co "))
        self.assertEqual(booking.event_id, self.event_id)
        self.assertEqual(booking.email, "a@b.co")

    def test_normalize_booking_rejects_bad_email(self):
        with self.assertRaises(ValidationError) as ctx:
            normalize_booking(Booking(event_id=self.event_id, email="not-an-email"))
        self.assertEqual(ctx.exception.field, "email")

    def test_normalize_booking_rejects_bad_event_id(self):
        for bad in ("abc", None, 12):
            with self.assertRaises(ValidationError, msg=repr(bad)) as ctx:
                normalize_booking(Booking(event_id=bad, email="a@b.co"))
            self.assertEqual(ctx.exception.field, "event_id")

    async def test_validate_booking_success(self):
        outcome = await validate_booking(Booking(event_id=self.event_id, email="a@b.co"), self.events)

        self.assertTrue(outcome.ok)
        self.events.find_one.assert_awaited_once_with({"_id": self.event_id}, projection={"_id": 1})

    async def test_validate_booking_missing_event(self):
        self.events.find_one.return_value = None

        outcome = await validate_booking(Booking(event_id=self.event_id, email="a@b.co"), self.events)

        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, ReferentialError)

    async def test_validate_booking_bad_email_skips_lookup(self):
        outcome = await validate_booking(Booking(event_id=self.event_id, email="not-an-email"), self.events)

        self.assertIsInstance(outcome.error, ValidationError)
        self.events.find_one.assert_not_awaited()


if __name__ == '__main__':
    unittest.main()
