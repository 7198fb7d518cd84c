# room_monitor/domain/schemas.py

from pydantic import BaseModel, Field

from room_monitor_core.domain.models import RoomStatus, SensorReading


class SensorReadingOut(BaseModel):
    time: str = Field(..., description="Time-of-day label, e.g. 14:00")
    temperature: float = Field(..., description="Temperature in °C")
    humidity: float = Field(..., description="Relative humidity in %")

    @classmethod
    def from_domain(cls, reading: SensorReading) -> "SensorReadingOut":
        return cls(
            time=reading.time,
            temperature=reading.temperature,
            humidity=reading.humidity,
        )

    def to_domain(self) -> SensorReading:
        return SensorReading(time=self.time, temperature=self.temperature, humidity=self.humidity)


class RoomStatusOut(BaseModel):
    room: str
    temperature: float
    humidity: float

    @classmethod
    def from_domain(cls, status: RoomStatus) -> "RoomStatusOut":
        return cls(room=status.room, temperature=status.temperature, humidity=status.humidity)

    def to_domain(self) -> RoomStatus:
        return RoomStatus(room=self.room, temperature=self.temperature, humidity=self.humidity)
