import pytest

from portfolio_site.validation import normalize_email, validate_contact


@pytest.mark.contact
@pytest.mark.parametrize("field, low, high", [
    ("name", 2, 100),
    ("subject", 5, 200),
    ("message", 10, 1000),
])
def test_length_bounds_are_inclusive(valid_contact, field, low, high):
    for n, ok in [(low - 1, False), (low, True), (high, True), (high + 1, False)]:
        _, errors = validate_contact(dict(valid_contact, **{field: "x" * n}))
        assert (errors == []) is ok, (field, n)


@pytest.mark.contact
def test_length_is_measured_after_trimming(valid_contact):
    _, errors = validate_contact(dict(valid_contact, name="   A   "))
    assert [e["path"] for e in errors] == ["name"]
    assert errors[0]["value"] == "A"
    assert errors[0]["location"] == "body"


@pytest.mark.contact
def test_escaping_does_not_count_against_length(valid_contact):
    clean, errors = validate_contact(dict(valid_contact, name="&" * 100))
    assert errors == []
    assert clean["name"] == "&amp;" * 100


@pytest.mark.contact
@pytest.mark.parametrize("value", [None, 42, ["a", "b"], {"x": 1}])
def test_non_text_values_fail_cleanly(valid_contact, value):
    _, errors = validate_contact(dict(valid_contact, subject=value))
    assert [e["path"] for e in errors] == ["subject"]


@pytest.mark.contact
@pytest.mark.parametrize("bad", ["", "plain", "a@", "@b.com", "a b@c.com"])
def test_bad_emails(valid_contact, bad):
    _, errors = validate_contact(dict(valid_contact, email=bad))
    assert errors and errors[0]["msg"] == "Please provide a valid email address"


@pytest.mark.contact
def test_email_is_trimmed_and_normalized(valid_contact):
    clean, errors = validate_contact(dict(valid_contact, email="  Jane.Doe@Example.ORG "))
    assert errors == []
    assert clean["email"] == "jane.doe@example.org"


@pytest.mark.contact
def test_gmail_normalization():
    assert normalize_email("J.Doe+news@googlemail.com") == "jdoe@gmail.com"
    assert normalize_email("J.Doe@outlook.com") == "j.doe@outlook.com"


@pytest.mark.contact
@pytest.mark.parametrize("raw, expected", [
    ("Jane+Work@Outlook.com", "jane@outlook.com"),
    ("jane.doe+x@hotmail.co.uk", "jane.doe@hotmail.co.uk"),
    ("jane+news@iCloud.com", "jane@icloud.com"),
    ("jane+a+b@me.com", "jane@me.com"),
    ("jane-doe-shop@yahoo.com", "jane-doe@yahoo.com"),
    ("jane+x@ymail.com", "jane+x@ymail.com"),
    ("jane-x@example.org", "jane-x@example.org"),
])
def test_provider_subaddresses_are_dropped(raw, expected):
    assert normalize_email(raw) == expected


@pytest.mark.contact
def test_tag_only_local_part_is_kept():
    assert normalize_email("+news@outlook.com") == "+news@outlook.com"
