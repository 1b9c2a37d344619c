"""A simulated SpaceWire device interface that can serve synthetic ToF data."""

from __future__ import annotations

from dataclasses import dataclass, field

from tofsim.tof_data_generator import ToFDataGenerator


class ChannelError(Exception):
    """Raised when a channel cannot be opened on a device."""


@dataclass(frozen=True)
class MockDevice:
    """A simulated device and the bitmask of its available channels."""

    id: int
    type: str
    channel_mask: int


@dataclass
class MockChannel:
    """A channel opened on a simulated device."""

    id: int
    device_id: int
    channel_number: int
    open: bool = True


UNKNOWN_DEVICE = "Unknown Device"


@dataclass
class MockStarAPI:
    """Simulated device API with one four-channel device.

    When ``tof_generator`` is set, received packets carry pixels of its
    first frame; otherwise they hold incrementing byte values.
    """

    tof_generator: ToFDataGenerator | None = None
    devices: list[MockDevice] = field(
        default_factory=lambda: [MockDevice(0, "SpaceWire Brick Mk4", 0x0F)]
    )
    channels: list[MockChannel] = field(default_factory=list)
    _next_channel_id: int = field(default=1, repr=False)

    def device_list(self) -> list[MockDevice]:
        """Return the available devices."""
        return list(self.devices)

    def _find_device(self, device_id: int) -> MockDevice | None:
        return next((dev for dev in self.devices if dev.id == device_id), None)

    def device_type_as_string(self, device_id: int) -> str:
        """Return the type name of a device, or ``"Unknown Device"``."""
        device = self._find_device(device_id)
        return device.type if device else UNKNOWN_DEVICE

    def device_channels(self, device_id: int) -> int:
        """Return the channel bitmask of a device, or 0 if it is unknown."""
        device = self._find_device(device_id)
        return device.channel_mask if device else 0

    def open_channel_to_local_device(self, device_id: int, channel_number: int) -> int:
        """Open a channel and return its id.

        Raises ChannelError if the device is unknown or lacks the channel.
        """
        device = self._find_device(device_id)
        if (
            device is None
            or channel_number < 0
            or not device.channel_mask & (1 << channel_number)
        ):
            raise ChannelError(
                f"Channel {channel_number} is not available on device {device_id}"
            )
        channel_id = self._next_channel_id
        self._next_channel_id += 1
        self.channels.append(MockChannel(channel_id, device_id, channel_number))
        return channel_id

    def close_channel(self, channel_id: int) -> None:
        """Mark a channel as closed; unknown ids are ignored."""
        for channel in self.channels:
            if channel.id == channel_id:
                channel.open = False
                break

    def transmit_packet(self, channel_id: int, data: bytes) -> None:
        """Pretend to send ``data``, reporting its size."""
        print(f"[MockStarAPI] Transmit on channel {channel_id}: {len(data)} bytes")

    def receive_packet(self, channel_id: int, length: int) -> bytes:
        """Return ``length`` bytes of simulated data."""
        if self.tof_generator is not None:
            return self.tof_generator.frame_packet(0, 0, length // 2)
        data = bytes(i & 0xFF for i in range(length))
        print(f"[MockStarAPI] Receive on channel {channel_id}: {length} bytes")
        return data