from fastapi import APIRouter

from airline_api.api.routes import health, auth, flights, passenger, agent, crew, admin

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])  # GET
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])  # POST /login, /register
api_router.include_router(flights.router, prefix="/flights", tags=["flights"])  # GET /search (public)
api_router.include_router(passenger.router, prefix="/passenger", tags=["passenger"])  # own tickets
api_router.include_router(agent.router, prefix="/agent", tags=["agent"])  # lookup, book on behalf, refund
api_router.include_router(crew.router, prefix="/crew", tags=["crew"])  # schedule, flight status, incidents
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])  # flight/aircraft catalog
