"""
In‑memory entity store and first‑run seeding.

``MemoryStore`` is the only component that mutates persisted state.
It keeps one insertion‑ordered map per entity, keyed by integer ids
that it assigns itself from per‑entity counters; ids are never reused.
The store is a plain persistence primitive: it does not check
uniqueness (callers look records up by email or username first), it
does not validate input (schemas do that upstream) and it signals a
missing record by returning ``None`` rather than raising.

A single store is created by ``create_app`` and reachable from
handlers through the ``get_store`` dependency.  Nothing is durable and
nothing is shared between processes; each instance of the service
holds its own copy of the data.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import Request

from .config import Settings
from ..schemas.booking import Booking, BookingCreate, BookingStatus, new_booking
from ..schemas.common import utcnow
from ..schemas.company_settings import (
    CompanySettings,
    CompanySettingsInput,
    merge_company_settings,
)
from ..schemas.maid import Maid, MaidCreate, new_maid
from ..schemas.user import User, UserCreate, UserRole, new_user
from ..schemas.waitlist import WaitlistCreate, WaitlistEntry, new_waitlist_entry


logger = logging.getLogger(__name__)


class MemoryStore:
    """Process‑local storage for users, waitlist entries, maids,
    bookings and the company settings singleton."""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._waitlist: Dict[int, WaitlistEntry] = {}
        self._maids: Dict[int, Maid] = {}
        self._bookings: Dict[int, Booking] = {}
        self._company_settings: Optional[CompanySettings] = None
        self._next_ids = {"user": 1, "waitlist": 1, "maid": 1, "booking": 1}

    def _next_id(self, entity: str) -> int:
        value = self._next_ids[entity]
        self._next_ids[entity] = value + 1
        return value

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    def list_users(self) -> List[User]:
        return list(self._users.values())

    def create_user(
        self,
        data: UserCreate,
        password_hash: str,
        role: UserRole = UserRole.CUSTOMER,
    ) -> User:
        """Store a user; ``password_hash`` must already be hashed."""
        user = new_user(self._next_id("user"), data, password_hash, utcnow(), role=role)
        self._users[user.id] = user
        return user

    # ------------------------------------------------------------------
    # Waitlist
    # ------------------------------------------------------------------
    def list_waitlist_entries(self) -> List[WaitlistEntry]:
        return list(self._waitlist.values())

    def count_waitlist_entries(self) -> int:
        return len(self._waitlist)

    def get_waitlist_entry_by_email(self, email: str) -> Optional[WaitlistEntry]:
        return next((e for e in self._waitlist.values() if e.email == email), None)

    def create_waitlist_entry(self, data: WaitlistCreate) -> WaitlistEntry:
        entry = new_waitlist_entry(self._next_id("waitlist"), data, utcnow())
        self._waitlist[entry.id] = entry
        return entry

    # ------------------------------------------------------------------
    # Maids
    # ------------------------------------------------------------------
    def list_maids(self) -> List[Maid]:
        return list(self._maids.values())

    def list_maids_by_city(self, city: str) -> List[Maid]:
        wanted = city.lower()
        return [m for m in self._maids.values() if m.city.lower() == wanted]

    def list_maids_by_locality(self, locality: str) -> List[Maid]:
        wanted = locality.lower()
        return [m for m in self._maids.values() if m.locality.lower() == wanted]

    def get_maid(self, maid_id: int) -> Optional[Maid]:
        return self._maids.get(maid_id)

    def get_maid_by_email(self, email: str) -> Optional[Maid]:
        return next((m for m in self._maids.values() if m.email == email), None)

    def create_maid(self, data: MaidCreate, joined_at: Optional[datetime] = None) -> Maid:
        maid = new_maid(self._next_id("maid"), data, joined_at or utcnow())
        self._maids[maid.id] = maid
        return maid

    def update_maid_availability(self, maid_id: int, is_available: bool) -> Optional[Maid]:
        maid = self._maids.get(maid_id)
        if maid is None:
            return None
        updated = maid.model_copy(update={"is_available": is_available})
        self._maids[maid_id] = updated
        return updated

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def list_bookings(self) -> List[Booking]:
        return list(self._bookings.values())

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def list_bookings_by_user(self, user_id: int) -> List[Booking]:
        return [b for b in self._bookings.values() if b.user_id == user_id]

    def list_bookings_by_maid(self, maid_id: int) -> List[Booking]:
        return [b for b in self._bookings.values() if b.maid_id == maid_id]

    def create_booking(self, user_id: int, data: BookingCreate) -> Booking:
        booking = new_booking(self._next_id("booking"), user_id, data, utcnow())
        self._bookings[booking.id] = booking
        return booking

    def update_booking_status(self, booking_id: int, status: BookingStatus) -> Optional[Booking]:
        booking = self._bookings.get(booking_id)
        if booking is None:
            return None
        updated = booking.model_copy(update={"status": status})
        self._bookings[booking_id] = updated
        return updated

    # ------------------------------------------------------------------
    # Company settings
    # ------------------------------------------------------------------
    def get_company_settings(self) -> Optional[CompanySettings]:
        return self._company_settings

    def upsert_company_settings(self, data: CompanySettingsInput) -> CompanySettings:
        self._company_settings = merge_company_settings(self._company_settings, data, utcnow())
        return self._company_settings


def get_store(request: Request) -> MemoryStore:
    """FastAPI dependency returning the application's entity store."""
    return request.app.state.store


# ---------------------------------------------------------------------------
# First‑run seeding
# ---------------------------------------------------------------------------

SAMPLE_MAIDS = [
    {
        "name": "Priya Sharma", "email": "priya.sharma@example.com", "phone": "9876543210",
        "city": "Mumbai", "locality": "Andheri", "address": "123 Main Street, Andheri East",
        "experience": "5 years", "services": ["Cleaning", "Cooking", "Child Care"],
        "joined_at": "2023-01-15T08:30:00Z",
    },
    {
        "name": "Anjali Patel", "email": "anjali.patel@example.com", "phone": "8765432109",
        "city": "Mumbai", "locality": "Bandra", "address": "45 Park Avenue, Bandra West",
        "experience": "3 years", "services": ["Cleaning", "Laundry"],
        "joined_at": "2023-03-10T10:15:00Z",
    },
    {
        "name": "Lakshmi Reddy", "email": "lakshmi.reddy@example.com", "phone": "7654321098",
        "city": "Bangalore", "locality": "Indiranagar", "address": "78 Green View, Indiranagar",
        "experience": "7 years", "services": ["Cooking", "Cleaning", "Elder Care"],
        "joined_at": "2022-11-05T09:45:00Z",
    },
    {
        "name": "Meena Kumari", "email": "meena.kumari@example.com", "phone": "6543210987",
        "city": "Delhi", "locality": "Saket", "address": "25 Ring Road, Saket",
        "experience": "4 years", "services": ["Cooking", "Child Care"],
        "joined_at": "2023-02-22T14:30:00Z",
    },
    {
        "name": "Sunita Devi", "email": "sunita.devi@example.com", "phone": "5432109876",
        "city": "Delhi", "locality": "Connaught Place", "address": "10 Central Lane, Connaught Place",
        "experience": "6 years", "services": ["Cleaning", "Laundry", "Cooking"],
        "joined_at": "2022-12-18T11:20:00Z",
    },
    {
        "name": "Rekha Mishra", "email": "rekha.mishra@example.com", "phone": "4321098765",
        "city": "Kolkata", "locality": "Salt Lake", "address": "55 Lake View, Salt Lake",
        "experience": "8 years", "services": ["Cleaning", "Cooking", "Elder Care", "Child Care"],
        "joined_at": "2022-10-30T07:55:00Z",
    },
    {
        "name": "Geeta Singh", "email": "geeta.singh@example.com", "phone": "3210987654",
        "city": "Chennai", "locality": "Adyar", "address": "32 Beach Road, Adyar",
        "experience": "2 years", "services": ["Cleaning"],
        "joined_at": "2023-04-05T15:40:00Z",
    },
    {
        "name": "Kavita Joshi", "email": "kavita.joshi@example.com", "phone": "2109876543",
        "city": "Hyderabad", "locality": "Banjara Hills", "address": "89 Hill View, Banjara Hills",
        "experience": "5 years", "services": ["Cooking", "Child Care"],
        "joined_at": "2023-01-28T12:10:00Z",
    },
    {
        "name": "Deepa Gupta", "email": "deepa.gupta@example.com", "phone": "1098765432",
        "city": "Pune", "locality": "Koregaon Park", "address": "12 River Road, Koregaon Park",
        "experience": "4 years", "services": ["Cleaning", "Laundry", "Cooking"],
        "joined_at": "2023-02-14T13:25:00Z",
    },
    {
        "name": "Asha Verma", "email": "asha.verma@example.com", "phone": "0987654321",
        "city": "Jaipur", "locality": "Malviya Nagar", "address": "67 Pink City, Malviya Nagar",
        "experience": "3 years", "services": ["Cleaning", "Elder Care"],
        "joined_at": "2023-03-20T16:15:00Z",
    },
]

DEFAULT_COMPANY_SETTINGS = {
    "company_name": "MaidEasy",
    "contact_email": "contact@maideasy.com",
    "contact_phone": "+91 9876543210",
    "address": "123 Main Street, Mumbai, India",
    "logo": "/logo.png",
    "services_offered": ["Cleaning", "Cooking", "Child Care", "Elderly Care", "Laundry", "Pet Care"],
    "operating_hours": "Monday to Saturday, 8:00 AM to 8:00 PM",
}


def init_store(store: MemoryStore, settings: Settings) -> None:
    """Seed the store on first run.

    Creates the administrator account when no user with
    ``settings.admin_username`` exists.  With ``seed_sample_data`` the
    sample maid directory and the default company settings are added
    as well.  Running it again does not duplicate anything.
    """
    from maid_easy_api.app.services.auth_service import AuthService

    AuthService.ensure_admin(store, settings)

    if not settings.seed_sample_data:
        return
    added = 0
    for sample in SAMPLE_MAIDS:
        if store.get_maid_by_email(sample["email"]):
            continue
        fields = {k: v for k, v in sample.items() if k != "joined_at"}
        joined_at = datetime.fromisoformat(sample["joined_at"].replace("Z", "+00:00"))
        store.create_maid(MaidCreate(**fields), joined_at=joined_at)
        added += 1
    if added:
        logger.info("Seeded %d sample maids", added)
    if store.get_company_settings() is None:
        store.upsert_company_settings(CompanySettingsInput(**DEFAULT_COMPANY_SETTINGS))
        logger.info("Seeded default company settings")
