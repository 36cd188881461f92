from __future__ import annotations

from dataclasses import dataclass

from .api.client import ApiConfig, BackendClient
from .auth.http_auth_repository import HttpAuthRepository
from .auth.service import AuthService, SubAdminService
from .dashboard.service import DashboardService
from .geocoding.reverse import ReverseGeocoder
from .persons.http_person_repository import HttpPersonRepository
from .persons.service import PersonService
from .qr.http_qr_repository import HttpQRRepository
from .qr.service import QRService


@dataclass(frozen=True)
class Container:
    client: BackendClient

    auth_repo: HttpAuthRepository
    persons_repo: HttpPersonRepository
    qr_repo: HttpQRRepository
    geocoder: ReverseGeocoder

    auth_service: AuthService
    sub_admin_service: SubAdminService
    person_service: PersonService
    qr_service: QRService
    dashboard_service: DashboardService


def build_container(*, api_config: dict) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", 15)),
    )
    client = BackendClient(config)

    auth_repo = HttpAuthRepository(client)
    persons_repo = HttpPersonRepository(client)
    qr_repo = HttpQRRepository(client)
    geocoder = ReverseGeocoder(str(api_config.get("geocode_api_key") or ""), timeout=config.timeout)

    auth_service = AuthService(auth_repo)
    sub_admin_service = SubAdminService(auth_repo)
    person_service = PersonService(persons_repo)
    qr_service = QRService(qr_repo)
    dashboard_service = DashboardService(
        person_service,
        qr_service,
        geocoder,
        max_workers=int(api_config.get("qr_fetch_workers", 8)),
    )

    return Container(
        client=client,
        auth_repo=auth_repo,
        persons_repo=persons_repo,
        qr_repo=qr_repo,
        geocoder=geocoder,
        auth_service=auth_service,
        sub_admin_service=sub_admin_service,
        person_service=person_service,
        qr_service=qr_service,
        dashboard_service=dashboard_service,
    )
