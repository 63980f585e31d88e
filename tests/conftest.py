# tests/conftest.py
import pytest

from infra.services import build_services
from infra.settings import EngineSettings
from loadgrid.domain import ResourceAllocation, WorkItem


def _make_item(item_id, start, end, capacity=None, *, resource_id="r1", name=None, resources=None):
    if resources is None and capacity is not None:
        resources = [ResourceAllocation(resource_id, capacity)]
    return WorkItem(
        id=item_id,
        name=name or f"Task {item_id}",
        start_date=start,
        end_date=end,
        resources=resources,
    )


@pytest.fixture
def make_item():
    return _make_item


@pytest.fixture
def services():
    return build_services(EngineSettings(tree_threshold=100, base_row_height=51, cache_max_entries=10))
