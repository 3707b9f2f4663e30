from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.startup import configure_logging, run_startup_checks
from core.config import settings
from core.exceptions import register_exception_handlers
from core.query_logger import query_logger_instance

# ========== Logistics ==========
from modules.staff.routes import router as staff_router
from modules.equipment.routes import router as equipment_router
from modules.transport.routes import router as transport_router

# ========== Registration ==========
from modules.participants.routes import logistics_router as participant_options_router
from modules.participants.routes import router as participant_router
from modules.events.routes import router as event_router
from modules.teams.routes import router as team_router

# ========== Dashboard ==========
from modules.dashboard.routes import router as dashboard_router

# ========== Financials ==========
from modules.financials.routes import router as financial_router

configure_logging()

app = FastAPI(
    title="Sports Meet Management API",
    description="""
    Back office for an inter-institute sports meet.

    ## Modules

    * **Logistics**: staff roster, equipment inventory with checkout and
      check-in, shuttle routes, vehicles and schedules
    * **Participants**: athlete registration with institute, hostel and mess
    * **Events**: the competition programme, teams and match fixtures
    * **Dashboard**: institute standings, recent results and upcoming matches
    * **Financials**: registration fees, fines, sponsorships and the incident log
    """,
    version="1.0.0",
)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(staff_router)
app.include_router(equipment_router)
app.include_router(transport_router)
app.include_router(participant_options_router)
app.include_router(participant_router)
app.include_router(event_router)
app.include_router(team_router)
app.include_router(financial_router)
app.include_router(dashboard_router)


@app.get("/", response_class=PlainTextResponse, tags=["Health"])
def read_root():
    return "Sports Management API is Running!"


@app.on_event("startup")
def startup_event():
    """Validate configuration and make sure the schema exists"""
    run_startup_checks()


@app.on_event("shutdown")
def shutdown_event():
    query_logger_instance.log_query_stats()
