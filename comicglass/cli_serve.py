import uvicorn

from comicglass.container import container


def main(argv: list[str] | None = None) -> int:
    settings = container.get_settings()
    # Run FastAPI app from comicglass.main:app
    uvicorn.run(
        "comicglass.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )  # type: ignore[arg-type]
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
