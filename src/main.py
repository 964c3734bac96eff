import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.api.common.config import get_config
from src.api.routes import api_router

config = get_config()

logging.basicConfig(
    level=config.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(
    title=config.title,
    description="Rent cycles and payment gap reconciliation for PG tenants",
    version="1.0.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add all endpoints from the API with an "api" prefix
app.include_router(api_router, prefix="/api")


@app.get("/health")
def health_check():
    return {"status": "healthy", "env": config.env}


# this only runs if `$ python src/main.py` is executed
if __name__ == '__main__':
    import uvicorn
    uvicorn.run("main:app", host='0.0.0.0', port=config.port, reload=not config.is_production)
