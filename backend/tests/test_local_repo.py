import asyncio
import pytest

from app.models.places_model import Place
from app.repos.local_repo import LocalRepository, haversine_km
from conftest import make_place


def test_haversine_one_degree_of_latitude():
    assert haversine_km(0, 0, 1, 0) == pytest.approx(111.19, abs=0.01)


def test_nearest_skips_places_without_location():
    repo = LocalRepository([Place(id="nowhere", name="X"), make_place(1, lat=0.1, lon=0.1)])
    places = asyncio.run(repo.nearest_places(0, 0, 3))
    assert [p.id for p in places] == ["1"]


def test_list_window_and_total():
    repo = LocalRepository([make_place(i) for i in range(12)])
    places, total = asyncio.run(repo.list_places(10, 10))
    assert total == 12
    assert [p.id for p in places] == ["10", "11"]


def test_from_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("h\th\th\th\th\th\n1\tA\tB\tC\t37.5\t55.5\n", encoding="utf-8")
    repo = LocalRepository.from_file(str(path))
    assert repo.places[0].location.lat == 55.5
    assert repo.places[0].location.lon == 37.5


def test_nearest_skips_non_object_locations():
    repo = LocalRepository([Place(id="str", location="0.0,0.0"), make_place(2, lat=1.0, lon=1.0)])
    places = asyncio.run(repo.nearest_places(0, 0, 3))
    assert [p.id for p in places] == ["2"]
