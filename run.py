from dotenv import load_dotenv
import uvicorn
import os

load_dotenv()

if __name__ == "__main__":
    log_level = os.getenv("LOG_LEVEL", "info")
    reload = os.getenv("RELOAD", "false").lower() == "true"

    uvicorn.run(
        "price_engine.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=reload,
        log_level=log_level,
        access_log=True
    )
