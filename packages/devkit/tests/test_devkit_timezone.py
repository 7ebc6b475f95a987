from safety_devkit.timezone import DEFAULT_TIMEZONE, now_local


def test_now_local_is_timezone_aware() -> None:
    now = now_local("Asia/Kolkata")
    assert now.utcoffset() is not None
    assert now.utcoffset().total_seconds() == 5.5 * 3600


def test_now_local_defaults_to_india() -> None:
    assert now_local().isoformat().endswith("+05:30")
    assert DEFAULT_TIMEZONE == "Asia/Kolkata"
