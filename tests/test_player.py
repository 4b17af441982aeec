import pytest

from splendor.packet import NetworkPacket
from splendor.player import Player, PlayerType


def test_defaults():
    player = Player(1, "Ada")
    assert player.type is PlayerType.USER
    assert player.prestige_points == 0
    assert player.to_package() == "0"


def test_add_prestige_points():
    player = Player(1, "Ada")
    player.add_prestige_points(3)
    player.add_prestige_points(2)
    assert player.prestige_points == 5


def test_round_trip_through_packet():
    sender = Player(1, "Ada")
    sender.add_prestige_points(11)
    packet = NetworkPacket()
    packet.set_player_data(sender.to_package())
    received = NetworkPacket.from_bytes(packet.to_bytes())
    other = Player(2, "Bob", PlayerType.COMPUTER)
    other.update_from_package(received)
    assert other.prestige_points == sender.prestige_points


def test_update_replaces_points():
    player = Player(1, "Ada", prestige_points=9)
    player.update_from_package(NetworkPacket(player_prestige_points="4"))
    assert player.prestige_points == 4


def test_update_with_empty_packet_raises():
    with pytest.raises(ValueError):
        Player(1, "Ada").update_from_package(NetworkPacket())


def test_rename():
    player = Player(3, "Player 3")
    player.name = "Eve"
    assert player.name == "Eve" and player.player_id == 3