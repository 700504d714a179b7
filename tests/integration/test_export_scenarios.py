"""End-to-end export on the seeded database."""

import pytest

from subject_rights.api.v1.dependencies import build_privacy_request_service


@pytest.mark.requires_db
async def test_subject_42_export(db_session, export_subject) -> None:
    service = build_privacy_request_service(db_session)

    result = await service.export_request(1)

    names = [d.name for d in result.domains]
    assert names == [
        "users",
        "user notes",
        "user profile",
        "user custom fields",
        "user message",
        "user contact",
        "user content",
        "content custom fields",
    ]
    populated = [d for d in result.domains if d.name != "user contact"]
    assert [len(d.items) for d in populated] == [1, 2, 1, 3, 5, 1, 2]
    assert result.domains[names.index("user contact")].items == ()
    assert "contact custom fields" not in names


@pytest.mark.requires_db
async def test_subject_42_export_content(db_session, export_subject) -> None:
    result = await build_privacy_request_service(db_session).export_request(1)
    domains = {d.name: d for d in result.domains}

    identity = domains["users"].items[0]
    assert identity.id == 42
    assert not {"password", "otp_key", "otep"} & set(identity.fields)
    assert identity.fields["block"] == "0"
    assert identity.fields["register_date"].startswith("2020-01-01T09:00:00")

    notes = domains["user notes"].items
    assert [n.id for n in notes] == [1, 3]
    assert not {"user_id", "created_user_id", "modified_user_id"} & set(notes[0].fields)

    messages = [m.fields["subject"] for m in domains["user message"].items]
    assert messages == ["m1", "m2", "m3", "m4", "m5"]

    user_fields = [i.fields for i in domains["user custom fields"].items]
    assert user_fields[1] == {
        "user_id": "42",
        "field_name": "hobbies",
        "field_title": "Hobbies",
        "field_value": "chess, climbing",
    }
    content_fields = [i.fields["content_id"] for i in domains["content custom fields"].items]
    assert content_fields == ["20", "20"]


@pytest.mark.requires_db
async def test_export_is_repeatable(db_session, export_subject) -> None:
    service = build_privacy_request_service(db_session)
    first = await service.export_request(1)
    second = await service.export_request(1)
    assert first.domains == second.domains


@pytest.mark.requires_db
async def test_each_contact_gets_its_own_custom_field_domain(db_session, contact_subject) -> None:
    result = await build_privacy_request_service(db_session).export_request(6)

    assert [d.name for d in result.domains] == [
        "users",
        "user notes",
        "user profile",
        "user custom fields",
        "user message",
        "user contact",
        "contact custom fields",
        "contact custom fields",
        "user content",
    ]
    contacts = result.domains[5].items
    assert [c.fields["name"] for c in contacts] == ["Carol at work", "Carol at home"]

    work, home = (d.items for d in result.domains[6:8])
    assert [i.fields for i in work] == [
        {"contact_id": "11", "field_name": "fax", "field_title": "Fax", "field_value": "0113 111"},
        {"contact_id": "11", "field_name": "department", "field_title": "Department", "field_value": "Sales"},
    ]
    assert [(i.fields["contact_id"], i.fields["field_value"]) for i in home] == [
        ("12", "0113 222"),
        ("12", "Unassigned"),
    ]
