"""Shared test fixtures for lol_api_doc tests."""

from __future__ import annotations

import pytest

from lol_api_doc.domain.enums import PrimitiveKind
from lol_api_doc.infrastructure.overrides.registry import (
    OperationPatch,
    OverrideRegistry,
    RegistryBuilder,
    resource_patch,
)


@pytest.fixture
def registry() -> OverrideRegistry:
    return (
        RegistryBuilder()
        .add(
            "test",
            resource_patch(
                operations={
                    "/thing/{thingId}": "Thing",
                    "/thing/by-owner/{ownerIds}": OperationPatch("ThingsByOwnerID", PrimitiveKind.INT64),
                    "/thing/by-summoner/{summonerIds}": "ThingsBySummoner",
                    "/things": "Things",
                },
                classes={
                    "ThingDto": "Thing",
                    "PartDto": "ThingPart",
                },
            ),
        )
        .add(
            "lol-static-data",
            resource_patch(
                operations={"/summoner-spell/{id}": "SummonerSpell"},
                classes={"SummonerSpellDto": "SummonerSpell"},
            ),
        )
        .build()
    )
