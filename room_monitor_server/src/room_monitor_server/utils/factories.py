import factory
from room_monitor_core.domain.models import RoomStatus, SensorReading


class SensorReadingFactory(factory.Factory):
    class Meta:
        model = SensorReading

    time = factory.Sequence(lambda n: f"{n % 24:02d}:00")
    temperature = 21.5
    humidity = 45.0


class RoomStatusFactory(factory.Factory):
    class Meta:
        model = RoomStatus

    room = factory.Sequence(lambda n: f"10{n % 10}")
    temperature = 22.0
    humidity = 40.0
