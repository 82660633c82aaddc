from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.orm import Session
from datetime import datetime, timedelta

from airline_api.db.session import get_db
from airline_api.models.flight import Flight, flight_row

router = APIRouter()

@router.get("/search")
def search_flights(
    db: Session = Depends(get_db),
    origin: str | None = None,
    destination: str | None = None,
    from_: str | None = Query(None, alias="from", description="Alias of origin"),
    to: str | None = Query(None, description="Alias of destination"),
    date: str | None = Query(None, description="Flight departure date YYYY-MM-DD"),
):
    origin = (origin or from_ or "").strip()
    destination = (destination or to or "").strip()
    date = (date or "").strip()

    q = db.query(Flight)
    if origin:
        q = q.filter(Flight.origin == origin)
    if destination:
        q = q.filter(Flight.destination == destination)
    if date:
        try:
            day = datetime.strptime(date, "%Y-%m-%d").date()
        except ValueError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date format, expected YYYY-MM-DD")
        start_dt = datetime.combine(day, datetime.min.time())
        q = q.filter(Flight.depart_time >= start_dt, Flight.depart_time < start_dt + timedelta(days=1))
    flights = q.order_by(Flight.depart_time.asc(), Flight.flight_num.asc()).all()
    return [flight_row(f) for f in flights]
