from datetime import datetime, timedelta, timezone

from ..util import (
    b64_to_dict,
    datetime_now,
    datetime_to_epoch,
    datetime_to_str,
    dict_to_b64,
    new_credential_id,
)


def test_datetime_to_str():
    assert datetime_to_str(datetime(2021, 4, 12, 10)) == "2021-04-12T10:00:00Z"
    assert (
        datetime_to_str(datetime(2021, 4, 12, 12, tzinfo=timezone(timedelta(hours=2))))
        == "2021-04-12T10:00:00Z"
    )
    assert datetime_to_str("2021-04-12T10:00:00Z") == "2021-04-12T10:00:00Z"
    assert datetime_to_str(datetime_now()).endswith("Z")


def test_datetime_to_epoch():
    assert datetime_to_epoch(datetime(1970, 1, 1, 0, 1)) == 60
    assert datetime_to_epoch(datetime(1970, 1, 1, 0, 1, tzinfo=timezone.utc)) == 60


def test_new_credential_id():
    first = new_credential_id()
    assert first.startswith("urn:uuid:")
    assert len(first) == len("urn:uuid:") + 36
    assert first != new_credential_id()


def test_b64_dict():
    value = {"sub": "did:example:456", "n": 1}
    encoded = dict_to_b64(value)
    assert "=" not in encoded
    assert b64_to_dict(encoded) == value
