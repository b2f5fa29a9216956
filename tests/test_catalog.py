"""Catalog loading and integrity checks."""

import json

import pytest

from careerpath.core.config import settings
from careerpath.engine.catalog import Catalog, CatalogError, load_catalog
from careerpath.schemas.certification import AREAS


def test_bundled_catalog_loads():
    catalog = load_catalog(settings.CATALOG_PATH)

    assert len(catalog) >= 10
    ids = [c.id for c in catalog]
    assert len(ids) == len(set(ids))
    for c in catalog:
        assert c.area in AREAS
        for p in c.prerequisites:
            assert catalog.get(p) is not None


def test_bundled_catalog_uses_wire_names():
    catalog = load_catalog(settings.CATALOG_PATH)
    ccp = catalog.get("aws-ccp")

    assert ccp.estimated_cost_usd == 100
    assert ccp.level == "beginner"


def test_from_json_parses_camel_case():
    raw = json.dumps([
        {"id": "a", "name": "A", "provider": "P", "level": "beginner",
         "durationHours": 10, "estimatedCostUSD": 50},
    ])
    catalog = Catalog.from_json(raw)

    assert catalog[0].duration_hours == 10
    assert catalog[0].estimated_cost_usd == 50
    assert catalog[0].area == "dev"


def test_duplicate_ids_rejected(certs):
    with pytest.raises(CatalogError, match="aws-ccp"):
        Catalog(certs + [certs[0]])


def test_unknown_prerequisite_rejected(certs):
    with pytest.raises(CatalogError, match="aws-saa"):
        Catalog(certs[1:])


def test_invalid_json_shape_rejected():
    with pytest.raises(CatalogError):
        Catalog.from_json('[{"id": "a", "name": "A", "provider": "P", "level": "expert"}]')


def test_missing_file(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "nope.json")


def test_catalog_is_read_only(catalog):
    with pytest.raises(Exception):
        catalog[0].name = "changed"
    assert not hasattr(catalog, "append")
