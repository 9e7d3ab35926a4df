from thds.xnat.properties import PropertyStore


def test_iterates_in_insertion_order():
    props = PropertyStore([("z", "1"), ("a", "2")])
    props.set("m", "3")
    assert list(props.items()) == [("z", "1"), ("a", "2"), ("m", "3")]


def test_resetting_a_key_keeps_its_position():
    props = PropertyStore([("z", "1"), ("a", "2")])
    props.set("z", "10")
    assert list(props) == ["z", "a"]
    assert props.get("z") == "10"


def test_missing_keys_read_empty_and_remove_is_idempotent():
    props = PropertyStore()
    assert props.get("nope") == ""
    props.remove("nope")
    assert len(props) == 0
    assert "nope" not in props
