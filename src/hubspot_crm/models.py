"""
Request and response models for HubSpot contacts and associations.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Value for the association type when associating a contact to a company
ASSOCIATION_CONTACT_TO_COMPANY = "contact_to_company"


class _HubSpotModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ContactInput(_HubSpotModel):
    """Body of a contact create or update request."""

    properties: Dict[str, str] = Field(default_factory=dict)


class Contact(_HubSpotModel):
    """Contact representation with its identifier."""

    id: str = ""
    properties: Dict[str, str] = Field(default_factory=dict)


class ContactOutput(_HubSpotModel):
    """Contact as returned by the HubSpot API."""

    id: str
    properties: Dict[str, Optional[str]] = Field(default_factory=dict)
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    archived: bool = False


class AssociationID(_HubSpotModel):
    id: str


class Association(_HubSpotModel):
    """The two objects to be associated and the type of their link."""

    association_type: str = Field(alias="type")
    from_: AssociationID = Field(alias="from")
    to: AssociationID


class AssociationInput(_HubSpotModel):
    """Batch of associations from one object type to another."""

    inputs: List[Association] = Field(default_factory=list)


class AssociationResults(_HubSpotModel):
    """Result of a successful call to the association batch API."""

    status: str = ""
    started_at: Optional[datetime] = Field(default=None, alias="startedAt")
    completed_at: Optional[datetime] = Field(default=None, alias="completedAt")
    results: List[Association] = Field(default_factory=list)


def new_contact_input(properties: Dict[str, str]) -> ContactInput:
    return ContactInput(properties=properties)


def new_contact(
    first_name: str,
    last_name: str,
    email: str,
    work_email: str,
    company: str
) -> Contact:
    """Create a contact body from the commonly used properties."""
    return Contact(
        properties={
            "firstname": first_name,
            "lastname": last_name,
            "email": email,
            "work_email": work_email,
            "company": company,
        }
    )


def new_single_contact_to_company_association_input(contact_id: str, company_id: str) -> AssociationInput:
    """Build an association input linking one contact to one company.

    Args:
        contact_id: HubSpot contact ID
        company_id: HubSpot company ID

    Returns:
        Association input with a single contact-to-company association
    """
    return AssociationInput(
        inputs=[
            Association(
                association_type=ASSOCIATION_CONTACT_TO_COMPANY,
                from_=AssociationID(id=contact_id),
                to=AssociationID(id=company_id),
            )
        ]
    )
