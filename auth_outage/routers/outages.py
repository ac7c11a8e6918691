from fastapi import APIRouter, Depends, HTTPException, status
from ..schemas.outage import Outage, OutageCreate, OutageUpdate
from ..dependencies import get_outage_repository
from ..repositories.outage import OutageRepository
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/", response_model=list[Outage])
def list_outages(repo: OutageRepository = Depends(get_outage_repository)):
    return repo.get_all()

@router.get("/{outage_id}", response_model=Outage)
def get_outage(outage_id: int, repo: OutageRepository = Depends(get_outage_repository)):
    outage = repo.get_by_id(outage_id)
    if outage is None:
        raise HTTPException(status_code=404, detail="Outage not found")
    return outage

@router.post("/", response_model=Outage, status_code=status.HTTP_201_CREATED)
def create_outage(payload: OutageCreate, repo: OutageRepository = Depends(get_outage_repository)):
    outage_id = repo.save(Outage(**payload.model_dump()))
    return repo.get_by_id(outage_id)

@router.put("/{outage_id}", response_model=Outage)
def update_outage(outage_id: int, payload: OutageUpdate, repo: OutageRepository = Depends(get_outage_repository)):
    existing = repo.get_by_id(outage_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Outage not found")
    outage = existing.model_copy(update=payload.model_dump())
    repo.save(outage)
    return repo.get_by_id(outage_id)

@router.delete("/{outage_id}")
def delete_outage(outage_id: int, repo: OutageRepository = Depends(get_outage_repository)):
    """Delete an outage. Deleting an outage that does not exist also succeeds."""
    repo.delete(outage_id)
    return {"message": "Outage deleted"}
