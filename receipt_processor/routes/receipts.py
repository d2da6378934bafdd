from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from ..database import get_db
from ..repository import SqlScoreRepository
from ..schemas import Receipt, ProcessResponse, PointsResponse
from ..services.scoring import ScoringService
from ..utils.logging import logger

router = APIRouter(prefix="/receipts", tags=["receipts"])

# ids are signed 64-bit in the database
MAX_RECEIPT_ID = 2**63 - 1

def get_scoring_service(db: Session = Depends(get_db)) -> ScoringService:
    return ScoringService(SqlScoreRepository(db))

@router.post("/process", response_model=ProcessResponse)
def process_receipt(receipt: Receipt, service: ScoringService = Depends(get_scoring_service)):
    logger.info("Processing receipt...")
    receipt_id = service.submit(receipt)
    logger.info("Finished processing receipt %s", receipt_id)
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: int = Path(ge=1, le=MAX_RECEIPT_ID),
               service: ScoringService = Depends(get_scoring_service)):
    logger.info("Retrieving points for receipt with id: [%s]", receipt_id)
    return PointsResponse(points=service.lookup(receipt_id))
