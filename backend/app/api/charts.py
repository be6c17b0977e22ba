from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from app.api.deps import get_record_store
from app.services.records import RecordStore
from app.services.weekly import weekly_hours

router = APIRouter(prefix="/charts", tags=["charts"])


@router.get("/weekly.png")
def get_weekly_chart(request: Request, store: RecordStore = Depends(get_record_store)):
    chart = request.app.state.weekly_chart
    png = chart.render(weekly_hours(store.list()))
    return Response(content=png, media_type="image/png")
