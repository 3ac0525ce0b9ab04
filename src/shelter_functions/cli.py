from __future__ import annotations

import asyncio
import json
from typing import List, Optional

import typer

from shelter_functions.auth import issue_id_token
from shelter_functions.functions import CATALOG

app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes (development)"),
):
    """Run the callable API with uvicorn."""
    import uvicorn

    from shelter_functions.app.core.logging import setup_logging

    setup_logging()
    uvicorn.run(
        "shelter_functions.api.fastapi:create_functions_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@app.command("catalog")
def catalog(as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table")):
    """List every callable operation with its auth tier and schema."""
    rows = []
    for name, op in sorted(CATALOG.items()):
        schema = op.schema if not callable(op.schema) else op.schema({})
        rows.append(
            {
                "name": name,
                "tier": op.tier,
                "schema": {k: str(v) for k, v in schema.items()},
                "notify_build": op.notify_build,
            }
        )
    if as_json:
        typer.echo(json.dumps(rows, indent=2))
        return
    for row in rows:
        fields = ", ".join(f"{k}:{v}" for k, v in row["schema"].items())
        suffix = "  [notifies build]" if row["notify_build"] else ""
        typer.echo(f"{row['name']:<26} {row['tier']:<14} {fields}{suffix}")


@app.command("mint-token")
def mint_token(
    uid: str = typer.Argument(..., help="Subject id"),
    claim: Optional[List[str]] = typer.Option(None, "--claim", "-c", help="Boolean claim to set, e.g. -c admin"),
    email: Optional[str] = typer.Option(None, help="Email claim"),
    lifetime: Optional[int] = typer.Option(None, help="Lifetime in seconds"),
):
    """Issue a development ID token signed with AUTH_JWT_SECRET."""
    claims: dict[str, object] = {c: True for c in claim or []}
    if email:
        claims["email"] = email
    typer.echo(issue_id_token(uid, claims, lifetime_seconds=lifetime))


@app.command("create-user")
def create_user(
    uid: str = typer.Argument(..., help="Subject id"),
    email: Optional[str] = typer.Option(None, help="Account email"),
    claim: Optional[List[str]] = typer.Option(None, "--claim", "-c", help="Boolean claim to set, e.g. -c admin"),
):
    """Store a user record in the configured document store (DB_BACKEND)."""
    from shelter_functions.db import easy_documents
    from shelter_functions.identity import DocumentIdentityProvider

    provider = DocumentIdentityProvider(easy_documents())
    record = asyncio.run(provider.create_user(uid, email=email, claims={c: True for c in claim or []}))
    claims = ",".join(sorted(record.custom_claims)) or "-"
    typer.echo(f"{record.uid} {record.email or '-'} {claims}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
