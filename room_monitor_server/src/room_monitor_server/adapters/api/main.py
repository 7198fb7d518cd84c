from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from room_monitor_server.adapters.api.routes import router

app = FastAPI(title="Room Monitor API")

# the dashboard is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.include_router(router)
