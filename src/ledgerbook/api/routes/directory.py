"""Customer, supplier and employee routes."""

from fastapi import APIRouter, Depends

from ledgerbook.api.dependencies import get_directory_service
from ledgerbook.api.schemas import (
    CreatedResponse,
    EmployeeFields,
    EmployeeResponse,
    MessageResponse,
    PartyFields,
    PartyResponse,
)
from ledgerbook.domain.directory import DirectoryService

router = APIRouter(tags=["directory"])


def _fields(body) -> dict:
    return body.model_dump(exclude_unset=True, exclude={"id"})


def _add_routes(path: str, kind: str, label: str, fields_model, response_model) -> None:
    """Register list, create, update and delete routes for one directory kind."""

    @router.get(path, response_model=list[response_model], name=f"list_{kind}s")
    def list_entries(service: DirectoryService = Depends(get_directory_service)):
        return [response_model.model_validate(e) for e in service.list_entries(kind)]

    @router.post(path, response_model=CreatedResponse, name=f"create_{kind}")
    def create_entry(body: fields_model, service: DirectoryService = Depends(get_directory_service)):
        entry = service.create_entry(kind, _fields(body), party_id=body.id)
        return CreatedResponse(id=entry.id, message=f"{label} created")

    @router.put(f"{path}/{{entry_id}}", response_model=MessageResponse, name=f"update_{kind}")
    def update_entry(
        entry_id: str, body: fields_model, service: DirectoryService = Depends(get_directory_service)
    ):
        service.update_entry(kind, entry_id, _fields(body))
        return MessageResponse(message=f"{label} updated")

    @router.delete(f"{path}/{{entry_id}}", response_model=MessageResponse, name=f"delete_{kind}")
    def delete_entry(entry_id: str, service: DirectoryService = Depends(get_directory_service)):
        service.delete_entry(kind, entry_id)
        return MessageResponse(message=f"{label} deleted")


_add_routes("/customers", "customer", "Customer", PartyFields, PartyResponse)
_add_routes("/suppliers", "supplier", "Supplier", PartyFields, PartyResponse)
_add_routes("/employees", "employee", "Employee", EmployeeFields, EmployeeResponse)
