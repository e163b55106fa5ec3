# models.py
"""
Data models for Who Has Phone
"""

import logging

from src.constants import DEFAULT_NAME, DEFAULT_AGE

logger = logging.getLogger(__name__)


def _coerce_age(value):
    """Return value as a non-negative int, or the default age"""
    if isinstance(value, bool):
        return DEFAULT_AGE
    try:
        age = int(value)
    except (TypeError, ValueError):
        return DEFAULT_AGE
    return age if age >= 0 else DEFAULT_AGE


class Person:
    """
    Represents one tracked person
    """
    def __init__(self, name=DEFAULT_NAME, age=DEFAULT_AGE, has_phone=False):
        self.name = name
        self.age = age
        self.has_phone = has_phone

    def __repr__(self):
        return f"Person(name='{self.name}', age={self.age}, has_phone={self.has_phone})"

    def __eq__(self, other):
        if not isinstance(other, Person):
            return NotImplemented
        return (self.name == other.name
                and self.age == other.age
                and self.has_phone == other.has_phone)

    # Mutable while drafted, so not hashable
    __hash__ = None

    def copy(self):
        """Return an independent copy of this person"""
        return Person(self.name, self.age, self.has_phone)

    def to_display_label(self):
        """Text used when the person is rendered as a label"""
        return self.name

    def to_dict(self):
        """Convert to dictionary for serialization"""
        return {
            'name': self.name,
            'age': self.age,
            'has_phone': self.has_phone
        }

    @classmethod
    def from_dict(cls, data):
        """Create Person from dictionary, defaulting any missing field"""
        name = data.get('name', DEFAULT_NAME)
        if name is None:
            name = DEFAULT_NAME
        has_phone = data.get('has_phone', False)
        return cls(
            name=name if isinstance(name, str) else str(name),
            age=_coerce_age(data.get('age', DEFAULT_AGE)),
            has_phone=has_phone if isinstance(has_phone, bool) else False
        )


class AppState:
    """
    Everything the app persists: the people list plus the add-dialog state.

    The draft is the edit buffer behind the add dialog. It is never an
    element of ``people``; submitting appends a copy and starts a new draft.
    """
    def __init__(self, people=None, dialog_open=False, draft=None):
        self.people = list(people) if people else []
        self.dialog_open = dialog_open
        self.draft = draft if draft is not None else Person()

    def __repr__(self):
        return f"AppState(people={len(self.people)}, dialog_open={self.dialog_open})"

    def add(self, person):
        """Append a person to the end of the list"""
        self.people.append(person)

    def find_index(self, person):
        """Index of the first structurally equal person, or None"""
        for index, candidate in enumerate(self.people):
            if candidate == person:
                return index
        return None

    def remove_at(self, index):
        """Remove and return the person at index; log and do nothing if absent"""
        if index is None or not 0 <= index < len(self.people):
            logger.warning(f"No person at index {index}, nothing removed")
            return None
        return self.people.pop(index)

    def reset_draft(self):
        """Replace the draft with a default person"""
        self.draft = Person()

    def to_dict(self):
        """Convert to dictionary for serialization"""
        return {
            'people': [person.to_dict() for person in self.people],
            'dialog_open': self.dialog_open,
            'draft': self.draft.to_dict()
        }

    @classmethod
    def from_dict(cls, data):
        """
        Create AppState from dictionary.

        The add dialog is never restored open: whatever was saved, the
        loaded state has ``dialog_open=False`` and a default draft.
        """
        records = data.get('people', [])
        if not isinstance(records, list):
            logger.warning(f"Ignoring people of type {type(records).__name__}")
            records = []

        people = []
        for record in records:
            if not isinstance(record, dict):
                logger.warning(f"Skipping malformed person record: {record!r}")
                continue
            people.append(Person.from_dict(record))
        return cls(people=people)
