"""Persistence helpers for spots, their display data and nearest stations."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from moptabi.domain.entities import NearestStation, OpeningHours, Spot, SpotMeta
from moptabi.infrastructure.models import NearestStationModel, SpotMetaModel, SpotModel


class SpotRepository:
    """Register spots and read them back with their metadata.

    Writes only flush so that callers can group several registrations in the
    transaction of a larger operation.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, spot_id: str) -> bool:
        return self.session.get(SpotModel, spot_id) is not None

    def existing_ids(self, spot_ids: Iterable[str]) -> set[str]:
        ids = set(spot_ids)
        if not ids:
            return set()
        rows = self.session.query(SpotModel.id).filter(SpotModel.id.in_(ids)).all()
        return {spot_id for (spot_id,) in rows}

    def add(self, spot: Spot) -> None:
        """Stage ``spot`` with its metadata and nearest stations."""

        model = SpotModel(id=spot.id)
        if spot.meta is not None:
            model.meta = SpotMetaModel()
            self._apply_meta_to_model(model.meta, spot.meta)
        for station in spot.nearest_stations:
            model.nearest_stations.append(
                NearestStationModel(
                    name=station.name,
                    walking_time=station.walking_time,
                    latitude=station.latitude,
                    longitude=station.longitude,
                )
            )
        self.session.add(model)
        self.session.flush()

    @staticmethod
    def to_entity(model: SpotModel, *, include_stations: bool = True) -> Spot:
        return Spot(
            id=model.id,
            meta=SpotRepository.meta_to_entity(model.meta) if model.meta else None,
            nearest_stations=(
                [SpotRepository._station_to_entity(s) for s in model.nearest_stations]
                if include_stations
                else []
            ),
        )

    @staticmethod
    def meta_to_entity(model: SpotMetaModel) -> SpotMeta:
        opening_hours = None
        if model.opening_hours is not None:
            opening_hours = [
                OpeningHours(day=item.get("day", ""), hours=item.get("hours", ""))
                for item in model.opening_hours
            ]
        return SpotMeta(
            id=model.id,
            spot_id=model.spot_id,
            name=model.name,
            latitude=model.latitude,
            longitude=model.longitude,
            image=model.image,
            rating=model.rating,
            categories=list(model.categories or []),
            catchphrase=model.catchphrase,
            description=model.description,
            opening_hours=opening_hours,
            address=model.address,
            prefecture=model.prefecture,
            url=model.url,
        )

    @staticmethod
    def _station_to_entity(model: NearestStationModel) -> NearestStation:
        return NearestStation(
            id=model.id,
            spot_id=model.spot_id,
            name=model.name,
            walking_time=model.walking_time,
            latitude=model.latitude,
            longitude=model.longitude,
        )

    @staticmethod
    def _apply_meta_to_model(model: SpotMetaModel, meta: SpotMeta) -> None:
        model.id = meta.id
        model.name = meta.name
        model.latitude = meta.latitude
        model.longitude = meta.longitude
        model.image = meta.image
        model.rating = meta.rating
        model.categories = list(meta.categories)
        model.catchphrase = meta.catchphrase
        model.description = meta.description
        model.opening_hours = (
            [{"day": item.day, "hours": item.hours} for item in meta.opening_hours]
            if meta.opening_hours is not None
            else None
        )
        model.address = meta.address
        model.prefecture = meta.prefecture
        model.url = meta.url

