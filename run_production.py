import uvicorn
from tripbook.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "tripbook.main:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
        workers=1,  # sqlite does not tolerate concurrent writers
        log_level=settings.log_level.lower(),
        access_log=True
    )
