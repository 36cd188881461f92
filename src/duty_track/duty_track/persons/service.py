from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.exceptions import ApiError, AuthorizationError, ValidationError
from .model import NewPerson, Person, SignupOutcome
from .repository import PersonRepository

logger = logging.getLogger(__name__)


class PersonService:
    """Use case: list and create the persons an admin owns.

    The last successful listing is kept in ``cached`` and replaced wholesale on
    every refetch.
    """

    def __init__(self, persons: PersonRepository):
        self._persons = persons
        self._cache: list[Person] = []

    @property
    def cached(self) -> list[Person]:
        return list(self._cache)

    def get_persons(self, admin_id: Optional[str], *, token: Optional[str] = None) -> Optional[list[Person]]:
        """Fetch the admin's persons; None when the backend call failed."""
        if not admin_id:
            logger.error("Admin ID is undefined for get_persons")
            return []

        try:
            raw = self._persons.list_for_admin(str(admin_id), token=token)
        except ApiError:
            logger.exception("Error fetching persons for admin %s", admin_id)
            return None

        self._cache = [Person.from_dict(r) for r in raw if isinstance(r, dict)]
        return self.cached

    def create_person(
        self,
        admin_id: Optional[str],
        *,
        name: str,
        pno_no: str,
        password: str,
        co: str,
        police_station: str,
        token: Optional[str] = None,
    ) -> SignupOutcome:
        if not admin_id:
            raise AuthorizationError("Admin ID not found. Cannot create user.")

        fields = [name, pno_no, password, co, police_station]
        if any(not (v or "").strip() for v in fields):
            raise ValidationError("Please fill all fields: Name, PNo No, Password, CO, and Police Station.")

        person = NewPerson(
            name=name.strip(),
            pno_no=pno_no.strip(),
            password=password,
            co=co.strip(),
            police_station=police_station.strip(),
        )
        status, data = self._persons.signup(str(admin_id), person.to_body(), token=token)
        return self._outcome(status, data, total=1, bulk=False)

    def create_bulk(
        self,
        admin_id: Optional[str],
        rows: Sequence[NewPerson],
        *,
        token: Optional[str] = None,
    ) -> SignupOutcome:
        if not admin_id:
            raise AuthorizationError("Admin ID not found. Cannot perform bulk signup.")
        if not rows:
            raise ValidationError("No valid user data found in the file.")

        status, data = self._persons.signup(str(admin_id), [r.to_body() for r in rows], token=token)
        return self._outcome(status, data, total=len(rows), bulk=True)

    def _outcome(self, status: int, data: dict, *, total: int, bulk: bool) -> SignupOutcome:
        operation = "Bulk user creation" if bulk else "User creation"

        if status == 207 and bulk:
            errors = list(data.get("errors") or [])
            if errors:
                logger.error("Bulk signup errors: %s", errors)
            return SignupOutcome(
                status_code=status,
                message=str(data.get("message") or f"{operation} partially complete."),
                created=max(total - len(errors), 0),
                failed=len(errors),
                errors=errors,
            )

        if status == 201:
            return SignupOutcome(status_code=status, message=f"{operation} successful!", created=total)

        return SignupOutcome(status_code=status, message=f"{operation} complete.", created=total)
