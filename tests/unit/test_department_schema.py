import pytest
from pydantic import ValidationError
from department_api.models.organization.department import Department
from department_api.schemas.organization.department_schema import DepartmentCreate, DepartmentUpdate, DepartmentResponse


def test_create_accepts_wire_names():
    data = DepartmentCreate.model_validate(
        {"departmentName": "IT", "departmentAddress": "Hyderabad", "departmentCode": "IT-06"}
    )
    assert (data.name, data.address, data.code) == ("IT", "Hyderabad", "IT-06")


@pytest.mark.parametrize("payload", [
    {"departmentName": ""},
    {"departmentName": "   "},
    {"departmentAddress": "Hyderabad"},
])
def test_create_rejects_blank_or_missing_name(payload):
    with pytest.raises(ValidationError):
        DepartmentCreate.model_validate(payload)


def test_update_allows_blank_fields():
    data = DepartmentUpdate.model_validate({"departmentName": "", "departmentAddress": "Pune"})
    assert data.name == ""
    assert data.address == "Pune"
    assert data.code is None


def test_response_serializes_with_wire_names():
    dept = Department(id=3, name="IT", address="Hyderabad", code="IT-06")

    body = DepartmentResponse.model_validate(dept).model_dump(by_alias=True)

    assert body == {
        "departmentId": 3,
        "departmentName": "IT",
        "departmentAddress": "Hyderabad",
        "departmentCode": "IT-06",
    }


@pytest.mark.parametrize("name", [" ", "   ", "\t"])
def test_update_rejects_whitespace_only_name(name):
    with pytest.raises(ValidationError):
        DepartmentUpdate.model_validate({"departmentName": name})


def test_update_accepts_null_name():
    assert DepartmentUpdate.model_validate({"departmentName": None}).name is None
