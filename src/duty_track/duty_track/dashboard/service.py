from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..core.constants import (
    ADDRESS_ERROR,
    ADDRESS_UNAVAILABLE,
    DEFAULT_QR_FETCH_WORKERS,
    FETCHING_ADDRESS,
    NO_SCAN_ADDRESS,
)
from ..geocoding.reverse import ReverseGeocoder
from ..persons.model import Person
from ..persons.service import PersonService
from ..qr.model import QRDataItem
from ..qr.service import QRService
from .model import DashboardData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanRow:
    """One table row; person cells are only drawn on the first row of a person."""

    sr_no: int
    person: Person
    address: str
    scanned_on: str
    police_station: str
    rowspan: int = 1
    first: bool = True
    never_scanned: bool = False


class DashboardService:
    """Joins persons, their scan history and the address of their last scan.

    Histories and addresses are fetched concurrently; a failed call leaves a
    placeholder instead of failing the page.
    """

    def __init__(
        self,
        persons: PersonService,
        qr: QRService,
        geocoder: ReverseGeocoder,
        *,
        max_workers: int = DEFAULT_QR_FETCH_WORKERS,
    ):
        self._persons = persons
        self._qr = qr
        self._geocoder = geocoder
        self._max_workers = max(1, int(max_workers))

    def load(self, admin_id: Optional[str], *, token: Optional[str] = None) -> DashboardData:
        error = None
        persons = self._persons.get_persons(admin_id, token=token)
        if persons is None:
            # keep showing the last list that loaded
            error = "Error fetching users"
            persons = self._persons.cached
        if not persons:
            return DashboardData(error=error)

        qr_map = self.fetch_histories(persons, token=token)
        address_map = self.resolve_addresses(qr_map)
        return DashboardData(persons=persons, qr_map=qr_map, address_map=address_map, error=error)

    def fetch_histories(self, persons: Sequence[Person], *, token: Optional[str] = None) -> dict[str, list[dict]]:
        pno_nos = list(dict.fromkeys(p.pno_no for p in persons))
        with ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="qr_history") as pool:
            histories = pool.map(lambda pno: self._qr.get_history(pno, token=token), pno_nos)
            return dict(zip(pno_nos, histories))

    def resolve_addresses(self, qr_map: Mapping[str, Sequence[dict]]) -> dict[str, str]:
        address_map: dict[str, str] = {}
        pending: dict[str, QRDataItem] = {}
        for pno_no, scans in qr_map.items():
            if scans:
                pending[pno_no] = QRDataItem.from_dict(scans[-1])
            else:
                address_map[pno_no] = NO_SCAN_ADDRESS

        if not pending:
            return address_map

        with ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="geocode") as pool:
            futures = {
                pno_no: pool.submit(self._geocoder.address_for, last.latitude, last.longitude)
                for pno_no, last in pending.items()
            }
            for pno_no, future in futures.items():
                try:
                    address_map[pno_no] = future.result() or ADDRESS_UNAVAILABLE
                except Exception:
                    logger.exception("Error fetching address for PNO %s", pno_no)
                    address_map[pno_no] = ADDRESS_ERROR

        return address_map

    @staticmethod
    def build_rows(
        persons: Sequence[Person],
        qr_map: Mapping[str, Sequence[dict]],
        address_map: Mapping[str, str],
    ) -> list[ScanRow]:
        rows: list[ScanRow] = []
        for index, person in enumerate(persons, start=1):
            scans = list(qr_map.get(person.pno_no) or [])
            address = address_map.get(person.pno_no) or (FETCHING_ADDRESS if scans else NO_SCAN_ADDRESS)

            if not scans:
                rows.append(
                    ScanRow(
                        sr_no=index,
                        person=person,
                        address=address,
                        scanned_on="Never Scanned",
                        police_station="N/A",
                        never_scanned=True,
                    )
                )
                continue

            for scan_index, raw in enumerate(scans):
                scan = QRDataItem.from_dict(raw)
                rows.append(
                    ScanRow(
                        sr_no=index,
                        person=person,
                        address=address,
                        scanned_on=scan.scanned_on,
                        police_station=scan.police_station,
                        rowspan=len(scans),
                        first=scan_index == 0,
                    )
                )
        return rows
