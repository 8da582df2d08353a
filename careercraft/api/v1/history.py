from fastapi import APIRouter, Depends, Response, status

from careercraft.history import KeyValueStore, clear_history, get_history, get_storage, log_history
from careercraft.schemas.history import HistoryEntryRequest, HistoryRecord

router = APIRouter()


@router.get("/history", response_model=list[HistoryRecord], response_model_exclude_none=True)
def list_history(storage: KeyValueStore = Depends(get_storage)):
    return get_history(storage)


@router.post(
    "/history",
    response_model=HistoryRecord,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def append_history(payload: HistoryEntryRequest, storage: KeyValueStore = Depends(get_storage)):
    return log_history(payload.type, payload.meta, storage=storage)


@router.delete("/history", status_code=status.HTTP_204_NO_CONTENT)
def delete_history(storage: KeyValueStore = Depends(get_storage)):
    clear_history(storage)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
