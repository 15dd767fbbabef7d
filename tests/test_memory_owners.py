from concurrent.futures import ThreadPoolExecutor

from sensorhub.domain import SensorOwner
from sensorhub.memory_owners import InMemorySensorOwnerRepository


def test_save_and_get_one():
    repo = InMemorySensorOwnerRepository()
    repo.save_sensor_owner(SensorOwner(user_id=1234, sensor_id=5678))

    links = repo.get_sensors_by_user_id(1234)
    assert len(links) == 1
    assert links[0].sensor_id == 5678


def test_collision_many_threads():
    repo = InMemorySensorOwnerRepository()
    links = [SensorOwner(user_id=1234 + i, sensor_id=5678 + i) for i in range(1000)]
    with ThreadPoolExecutor(max_workers=32) as pool:
        list(pool.map(repo.save_sensor_owner, links))
    for link in links:
        assert repo.get_sensors_by_user_id(link.user_id) == [link]


def test_get_empty_list():
    assert InMemorySensorOwnerRepository().get_sensors_by_user_id(1) == []


def test_get_list():
    repo = InMemorySensorOwnerRepository()
    repo.save_sensor_owner(SensorOwner(user_id=1, sensor_id=1))
    repo.save_sensor_owner(SensorOwner(user_id=1, sensor_id=2))
    repo.save_sensor_owner(SensorOwner(user_id=1, sensor_id=3))
    repo.save_sensor_owner(SensorOwner(user_id=2, sensor_id=4))
    repo.save_sensor_owner(SensorOwner(user_id=3, sensor_id=5))

    assert len(repo.get_sensors_by_user_id(1)) == 3
    assert len(repo.get_sensors_by_user_id(3)) == 1


def test_duplicate_link_stored_once():
    repo = InMemorySensorOwnerRepository()
    repo.save_sensor_owner(SensorOwner(user_id=1, sensor_id=1))
    repo.save_sensor_owner(SensorOwner(user_id=1, sensor_id=1))
    assert repo.get_sensors_by_user_id(1) == [SensorOwner(user_id=1, sensor_id=1)]