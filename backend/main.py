from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.distance_routes import router as distance_router
import logging
import os

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
# httpx logs every request URL at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

app = FastAPI(title="Driving Distance Backend")

# CORS (adjust for your frontend)
origins = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(distance_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
