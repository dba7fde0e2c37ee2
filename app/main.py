import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import services
from .errors import FinanceError
from .log import configure_logging
from .schemas import BudgetIn, TransactionIn
from .settings import Settings, get_settings
from .store import Store, init_store


logger = structlog.get_logger(__name__)


def get_store(request: Request) -> Store:
    return request.app.state.store


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Settings | None = None, *, store: Store | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Personal Finance API")
    app.state.settings = settings
    app.state.store = store or init_store(settings)

    @app.exception_handler(FinanceError)
    async def finance_error_handler(request: Request, exc: FinanceError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled_error", path=request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.post("/add_transaction", status_code=201)
    def add_transaction_route(body: TransactionIn, store: Store = Depends(get_store)):
        txn = services.add_transaction(
            store,
            account=body.account,
            amount=body.amount,
            category=body.category,
            subcategory=body.subcategory,
            description=body.description,
        )
        return {"message": "Transaction added successfully", "transaction": txn}

    @app.post("/set_budget")
    def set_budget_route(body: BudgetIn, store: Store = Depends(get_store)):
        account, budget = services.set_budget(
            store, account=body.account, budget=body.budget
        )
        return {"message": "Budget set successfully", "account": account, "budget": budget}

    @app.get("/generate_report")
    def generate_report_route(
        start_date: str | None = None,
        end_date: str | None = None,
        store: Store = Depends(get_store),
    ):
        report = services.generate_report(
            store, start_date=start_date, end_date=end_date
        )
        return {"report": report}

    @app.get("/get_summary")
    def get_summary_route(store: Store = Depends(get_store)):
        return {"summary": services.get_summary(store)}

    @app.get("/get_notifications")
    def get_notifications_route(store: Store = Depends(get_store)):
        return {"notifications": services.list_notifications(store)}

    return app


settings = get_settings()
configure_logging(settings.log_level)

app = create_app(settings)


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
