"""Unit tests for admin command parsing."""

from services.commands import AdminCommand, CommandKind, parse_admin_command


def test_exact_commands():
    assert parse_admin_command("#EndRaffle") == AdminCommand(CommandKind.END_RAFFLE)
    assert parse_admin_command("#ParticipantsCount") == AdminCommand(CommandKind.PARTICIPANTS_COUNT)
    assert parse_admin_command("#GiftcardsCount") == AdminCommand(CommandKind.GIFTCARDS_COUNT)


def test_exact_commands_tolerate_surrounding_whitespace():
    assert parse_admin_command("  #EndRaffle\n").kind is CommandKind.END_RAFFLE


def test_unknown_text_is_not_a_command():
    assert parse_admin_command("hello") is None
    assert parse_admin_command("#EndRaffle now") is None
    assert parse_admin_command("#endraffle") is None


def test_start_raffle_without_secret():
    """Only well-formed codes make it into the pool."""
    command = parse_admin_command("#StartRaffle\nABCDEF\nABC12\nabcdef\nXYZ123\n")
    assert command.kind is CommandKind.START_RAFFLE
    assert command.giftcards == frozenset({"ABCDEF", "XYZ123"})
    assert command.secret_code is None


def test_start_raffle_with_secret():
    command = parse_admin_command("#StartRaffle\n#SecretCode   GOLD  \nABCDEF\nQWERTY")
    assert command.secret_code == "GOLD"
    assert command.giftcards == frozenset({"ABCDEF", "QWERTY"})


def test_secret_marker_only_counts_on_first_line():
    """A secret marker further down is just an invalid code line."""
    command = parse_admin_command("#StartRaffle\nABCDEF\n#SecretCode GOLD")
    assert command.secret_code is None
    assert command.giftcards == frozenset({"ABCDEF"})


def test_empty_secret_is_no_secret():
    command = parse_admin_command("#StartRaffle\n#SecretCode\nABCDEF")
    assert command.secret_code is None


def test_duplicate_codes_collapse():
    command = parse_admin_command("#StartRaffle\nABCDEF\nABCDEF\r\nABCDEF")
    assert command.giftcards == frozenset({"ABCDEF"})
