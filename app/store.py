import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from app.models import RegistryMode, RegistryStatus, SellerProfileUpdate, SellerRecord
from app.seed_data import default_profile, seed_sellers
from app.snapshot import SnapshotError, SnapshotFile

logger = logging.getLogger(__name__)

# Keys removed from every record on load; no longer part of a seller profile.
RETIRED_FIELDS: tuple[str, ...] = ("defaultPricePerBag", "orderLink")


class DuplicateNameError(ValueError):
    def __init__(self, company_name: str) -> None:
        self.company_name = company_name
        super().__init__(
            f'Company name "{company_name}" is already taken by another seller. '
            "Please choose a different name."
        )


def normalize_company_name(name: str) -> str:
    return name.strip().casefold()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SellerRegistry:
    """
    Seller profiles keyed by id, cached in memory and mirrored to one JSON
    document.

    Every public call runs under a single re-entrant lock, so the
    load / name-check / merge / write sequence of an update is atomic with
    respect to any other call on the same registry.
    """

    def __init__(
        self,
        data_file: Path,
        seed: Optional[dict[str, SellerRecord]] = None,
    ) -> None:
        self._file = SnapshotFile(data_file)
        self._seed = seed if seed is not None else seed_sellers()
        self._sellers: dict[str, SellerRecord] = {}
        self._lock = threading.RLock()
        self._mode = RegistryMode.PERSISTENT
        self._loaded_at: Optional[str] = None
        self._last_error: Optional[str] = None
        self._last_write_error: Optional[str] = None

    @property
    def data_file(self) -> Path:
        return self._file.path

    # ── load / reconcile ──────────────────────────────────────────────────────

    def load(self) -> dict[str, SellerRecord]:
        """Reconcile the seed dataset with the persisted document and cache it."""
        with self._lock:
            try:
                persisted = self._file.read()
                if persisted is None:
                    snapshot = self._seed_copy()
                    mode = RegistryMode.BOOTSTRAPPED
                    logger.info(
                        "No persisted sellers at %s, bootstrapping %d seed sellers",
                        self.data_file, len(snapshot),
                    )
                else:
                    snapshot = self._reconcile(persisted)
                    mode = RegistryMode.PERSISTENT
            except (SnapshotError, ValidationError) as exc:
                logger.warning(
                    "Could not load sellers from %s, serving %d seed sellers: %s",
                    self.data_file, len(self._seed), exc,
                )
                self._install(self._seed_copy(), RegistryMode.DEGRADED, error=str(exc))
                return self._sellers

            self._save(snapshot)
            self._install(snapshot, mode)
            logger.info("Loaded %d sellers from %s", len(snapshot), self.data_file)
            return self._sellers

    def _reconcile(self, persisted: dict[str, Any]) -> dict[str, SellerRecord]:
        seed_docs = {sid: rec.to_document() for sid, rec in self._seed.items()}
        merged: dict[str, SellerRecord] = {}

        # 1. persisted records win over seed values, field by field
        for seller_id, raw in persisted.items():
            if not isinstance(raw, dict):
                raise SnapshotError(f"Seller '{seller_id}' is not a JSON object")
            doc = {**seed_docs.get(seller_id, {}), **raw}
            for field in RETIRED_FIELDS:
                doc.pop(field, None)
            doc["id"] = seller_id
            merged[seller_id] = SellerRecord.model_validate(doc)

        # 2. seed sellers the document does not know about yet
        for seller_id, record in self._seed.items():
            if seller_id not in merged:
                merged[seller_id] = record.model_copy(deep=True)

        return merged

    def _seed_copy(self) -> dict[str, SellerRecord]:
        return {sid: rec.model_copy(deep=True) for sid, rec in self._seed.items()}

    def _install(
        self,
        snapshot: dict[str, SellerRecord],
        mode: RegistryMode,
        error: Optional[str] = None,
    ) -> None:
        self._sellers = snapshot
        self._mode = mode
        self._last_error = error
        self._loaded_at = _utcnow().isoformat()

    def _save(self, snapshot: dict[str, SellerRecord]) -> None:
        # a failed write is recorded but the caller still installs the snapshot
        try:
            self._file.write({sid: rec.to_document() for sid, rec in snapshot.items()})
        except OSError as exc:
            logger.error("Failed to save sellers to %s: %s", self.data_file, exc)
            self._last_write_error = str(exc)
        else:
            self._last_write_error = None

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_sellers_data(self) -> dict[str, SellerRecord]:
        with self._lock:
            if not self._sellers:
                self.load()
            return dict(self._sellers)

    def get_seller_profile(self, seller_id: str) -> Optional[SellerRecord]:
        return self.get_sellers_data().get(seller_id)

    def is_company_name_available(
        self, company_name: str, exclude_id: Optional[str] = None
    ) -> bool:
        with self._lock:
            try:
                return self._name_available(self.load(), company_name, exclude_id)
            except Exception:
                logger.exception("Error checking availability of company name %r", company_name)
                return False

    @staticmethod
    def _name_available(
        snapshot: Mapping[str, SellerRecord],
        company_name: str,
        exclude_id: Optional[str],
    ) -> bool:
        wanted = normalize_company_name(company_name)
        for seller_id, record in snapshot.items():
            if exclude_id is not None and seller_id == exclude_id:
                continue
            if record.company_name and normalize_company_name(record.company_name) == wanted:
                return False
        return True

    def status(self) -> RegistryStatus:
        with self._lock:
            return RegistryStatus(
                mode=self._mode,
                data_file=str(self.data_file),
                record_count=len(self._sellers),
                loaded_at=self._loaded_at,
                last_error=self._last_error,
                last_write_error=self._last_write_error,
            )

    # ── writes ────────────────────────────────────────────────────────────────

    def update_seller_profile(
        self,
        seller_id: str,
        patch: Union[SellerProfileUpdate, Mapping[str, Any]],
    ) -> SellerRecord:
        """
        Shallow-merge ``patch`` into the seller's record and persist the whole
        registry. An unknown id is provisioned from the default profile first.

        Raises DuplicateNameError, without writing anything, when the
        resulting company name is held by another seller.
        """
        if not isinstance(patch, SellerProfileUpdate):
            patch = SellerProfileUpdate.model_validate(patch)
        changes = patch.changes()

        with self._lock:
            snapshot = dict(self.load())
            existing = snapshot.get(seller_id)
            now = _utcnow()
            base = existing if existing is not None else default_profile(seller_id, now)

            doc = {
                **base.to_document(),
                **changes,
                "id": seller_id,
                "updatedAt": now.isoformat(),
            }

            if "companyName" in changes or existing is None:
                name = doc.get("companyName")
                if name and not self._name_available(snapshot, name, exclude_id=seller_id):
                    logger.info("Rejected company name %r for seller %s", name, seller_id)
                    raise DuplicateNameError(name)

            record = SellerRecord.model_validate(doc)
            snapshot[seller_id] = record
            self._save(snapshot)
            if self._last_write_error is None:
                # the document now matches the cache, whatever the last load saw
                self._install(snapshot, RegistryMode.PERSISTENT)
            else:
                self._sellers = snapshot

        if existing is None:
            logger.info("Created seller %s (%s)", seller_id, record.company_name)
        else:
            logger.info("Updated seller %s", seller_id)
        return record
