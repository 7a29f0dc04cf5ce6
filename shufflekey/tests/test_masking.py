from shufflekey.util.masking import mask_for_log


def test_mask_for_log_keeps_head_and_tail():
    assert mask_for_log("12345678901") == "123******01"
    assert mask_for_log("123456") == "12**56"


def test_mask_for_log_short_values():
    assert mask_for_log("") == ""
    assert mask_for_log("7") == "*"
    assert mask_for_log("1234") == "1**4"


def test_mask_for_log_non_string_ids():
    assert mask_for_log(None) == "None"
    assert mask_for_log(42) == "42"
    assert mask_for_log(23422166453) == "234******53"
