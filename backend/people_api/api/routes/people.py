"""People Routes — HTTP binding for PersonResource.

Invariants:
    - GET /people returns every stored person in insertion order
    - GET /people/{key} returns the person or raises PersonNotFoundError (404)
    - POST /people answers 201 with the stored person
    - GET /people/error always fails and is answered by the catch-all handler
    - /error is registered before /{key} so it is never captured as a key

Design Decisions:
    - PersonResource injected via Depends: tests swap the singleton with
      reset_person_resource()
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from people_api.core.errors import PersonNotFoundError
from people_api.schemas.person import Person
from people_api.services.person_resource import PersonResource, get_person_resource

router = APIRouter(prefix="/people", tags=["people"])


@router.get("")
async def list_people(resource: PersonResource = Depends(get_person_resource)):
    """List every stored person."""
    return [p.to_json() for p in resource.list()]


@router.post("")
async def create_person(
    person: Person, resource: PersonResource = Depends(get_person_resource),
):
    """Store a person keyed by firstName; an existing entry is replaced."""
    created = await resource.create(person)
    return JSONResponse(
        status_code=created.status_code, content=created.body.to_json(),
    )


@router.get("/error")
async def throw_error(resource: PersonResource = Depends(get_person_resource)):
    resource.trigger_fault()


@router.get("/{key}")
async def get_person(
    key: str, resource: PersonResource = Depends(get_person_resource),
):
    """Fetch one person by first name."""
    person = resource.get_by_key(key)
    if person is None:
        raise PersonNotFoundError(key)
    return person.to_json()
