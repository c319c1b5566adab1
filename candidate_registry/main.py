from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from candidate_registry.config import get_settings
from candidate_registry.domain.models import Candidate
from candidate_registry.domain.query_spec import NumOp, QueryField, QuerySpec, SortMode, TextOp
from candidate_registry.errors import CandidateRegistryError, NotFoundError
from candidate_registry.reporter import print_candidates, print_error
from candidate_registry.repository.file_repository import FileCandidateRepository
from candidate_registry.service import CandidateService, OperationResult
from candidate_registry.utils.logging import configure_logging

app = typer.Typer(help="Candidate registry CLI.")

FileOption = typer.Option(
    None,
    "--file",
    "-f",
    help="Data file to use (default from settings / CANDIDATES_FILE).",
)


def _service(data_file: Optional[Path]) -> CandidateService:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    try:
        repository = FileCandidateRepository(data_file or settings.data_file)
    except CandidateRegistryError as exc:
        print_error(exc)
        raise typer.Exit(code=1) from exc
    return CandidateService(repository)


def _check(result: OperationResult) -> None:
    if not result.ok:
        print_error(result.error)
        raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"file={settings.data_file} | env={settings.app_env} | "
        f"log_level={settings.log_level} json_logs={settings.json_logs}"
    )


@app.command("list")
def list_candidates(data_file: Optional[Path] = FileOption) -> None:
    """
    List all candidates in storage order.
    """
    service = _service(data_file)
    print_candidates(service.find_all())


@app.command()
def add(
    name: str = typer.Option(..., "--name", "-n", help="Full name."),
    age: int = typer.Option(..., "--age", "-a", help="Age in years (16 or older)."),
    industry: str = typer.Option(..., "--industry", "-i", help="Industry, e.g. Software."),
    years: int = typer.Option(0, "--years", "-y", help="Years of experience."),
    data_file: Optional[Path] = FileOption,
) -> None:
    """
    Add a candidate; the id is assigned by the store.
    """
    service = _service(data_file)
    result = service.add(
        Candidate(name=name, age=age, industry=industry, years_of_experience=years)
    )
    _check(result)
    typer.echo(f"Added candidate id={result.value.id}")


@app.command()
def update(
    candidate_id: int = typer.Argument(..., help="Id of the candidate to replace."),
    name: Optional[str] = typer.Option(None, "--name", "-n"),
    age: Optional[int] = typer.Option(None, "--age", "-a"),
    industry: Optional[str] = typer.Option(None, "--industry", "-i"),
    years: Optional[int] = typer.Option(None, "--years", "-y"),
    data_file: Optional[Path] = FileOption,
) -> None:
    """
    Update a candidate. Options left out keep their current values.
    """
    service = _service(data_file)
    current = next((c for c in service.find_all() if c.id == candidate_id), None)
    if current is None:
        _check(OperationResult.failure(NotFoundError(f"update(): id={candidate_id} not found")))
    changes = {
        "name": name,
        "age": age,
        "industry": industry,
        "years_of_experience": years,
    }
    candidate = current.model_copy(
        update={k: v for k, v in changes.items() if v is not None} | {"id": candidate_id}
    )
    result = service.update(candidate)
    _check(result)
    typer.echo(f"Updated candidate id={candidate_id}")


@app.command()
def delete(
    candidate_id: int = typer.Argument(..., help="Id of the candidate to delete."),
    data_file: Optional[Path] = FileOption,
) -> None:
    """
    Delete a candidate by id.
    """
    service = _service(data_file)
    _check(service.delete(candidate_id))
    typer.echo(f"Deleted candidate id={candidate_id}")


@app.command()
def query(
    text: str = typer.Argument("", help="Query string (a number for age/years)."),
    field: QueryField = typer.Option(QueryField.NAME, "--field", case_sensitive=False),
    text_op: TextOp = typer.Option(TextOp.CONTAINS, "--text-op", case_sensitive=False),
    num_op: NumOp = typer.Option(NumOp.EQ, "--num-op", case_sensitive=False),
    sort: SortMode = typer.Option(SortMode.NAME_ASC, "--sort", "-s", case_sensitive=False),
    data_file: Optional[Path] = FileOption,
) -> None:
    """
    Filter and sort candidates.
    """
    service = _service(data_file)
    spec = QuerySpec(field=field, text_op=text_op, num_op=num_op, query=text, sort=sort)
    print_candidates(service.query(spec), title="Query results")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
