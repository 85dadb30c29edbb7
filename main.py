from department_api.core.config import settings


def run_http():
    """Run HTTP server on the configured host and port"""
    import uvicorn
    print(f"Starting HTTP server on port {settings.PORT}...")
    uvicorn.run(
        "department_api.main:app",  # Use string import
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run_http()
