"""
Session-backed booking draft.

The draft is stored JSON-serialisable in request.session['booking']:
{
    "location_id":             "<uuid>",
    "start_date":              "YYYY-MM-DD",
    "end_date":                "YYYY-MM-DD",
    "car_id":                  "<uuid>",
    "car_daily_price":         "50.00",
    "insurance_id":            "<uuid> | null",
    "insurance_price_per_day": "10.00 | null",
    "accessories":             [{"id": "<uuid>", "name": "...", "price": "5.00"}],
    "total_price":             "192.00 | null",
}

Views never touch session['booking'] directly: they go through
SessionDraftStore, which hands out BookingDraft objects. Concurrent
requests on the same session are not coordinated; the last save wins.
"""
from dataclasses import dataclass, field, asdict, fields
from typing import Optional

SESSION_KEY = 'booking'


@dataclass
class BookingDraft:
    location_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    car_id: Optional[str] = None
    car_daily_price: Optional[str] = None
    insurance_id: Optional[str] = None
    insurance_price_per_day: Optional[str] = None
    accessories: list = field(default_factory=list)
    total_price: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'BookingDraft':
        known = {f.name for f in fields(cls)}
        draft = cls(**{k: v for k, v in (data or {}).items() if k in known})
        if draft.accessories is None:
            draft.accessories = []
        return draft

    def to_dict(self) -> dict:
        return asdict(self)

    @property
    def is_empty(self) -> bool:
        return not any(self.to_dict().values())


class SessionDraftStore:
    """get / save / clear the booking draft of one session."""

    def __init__(self, session):
        self.session = session

    @classmethod
    def for_request(cls, request) -> 'SessionDraftStore':
        return cls(request.session)

    def get(self) -> BookingDraft:
        return BookingDraft.from_dict(self.session.get(SESSION_KEY, {}))

    def save(self, draft: BookingDraft) -> None:
        self.session[SESSION_KEY] = draft.to_dict()
        self.session.modified = True

    def clear(self) -> None:
        self.session.pop(SESSION_KEY, None)
        self.session.modified = True
