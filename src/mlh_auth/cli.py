import typer
import uvicorn

app = typer.Typer(help="MLHAuth CLI")


@app.command()
def run(
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """
    Run the FastAPI server
    """
    uvicorn.run(
        "mlh_auth.main:app",
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def providers() -> None:
    """
    List the registered OAuth providers
    """
    from mlh_auth.auth_strategies.oauth.factory import registered_providers

    for name in registered_providers():
        typer.echo(name)


if __name__ == "__main__":
    app()
