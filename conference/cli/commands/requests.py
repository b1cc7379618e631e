"""Make, list, answer and remove organizer requests."""

import typer
from rich.console import Console

from conference.cli.output import format_error, format_success, json_output
from conference.cli.utils import (
    CommandError,
    load_config,
    require_organizer,
    run_session,
    validate_message_content,
)
from conference.state import Request, StoreState, UserType, select_entry

console = Console()


def _validated(message: str) -> str:
    try:
        return validate_message_content(message)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)


def _request_dict(position: int, request: Request) -> dict:
    return {
        "position": position,
        "request_id": request.request_id,
        "author": request.author,
        "text": request.text,
        "created_at": request.created_at.isoformat(),
        "reply": request.reply,
        "reply_author": request.reply_author,
        "resolved": request.resolved,
    }


def request_command(message: str, json_flag: bool) -> None:
    """Send a request to the organizers."""
    content = _validated(message)
    config = load_config()

    request_id = run_session(
        lambda state: state.requests.add_request(content, config.username),
        "make request",
        config=config,
    )

    if json_flag:
        json_output(console, {"status": "requested", "request_id": request_id})
    else:
        format_success(console, "Your request has been sent to the organizers.")


def requests_command(mine: bool, json_flag: bool) -> None:
    """List requests: all of them for organizers, otherwise the user's own."""
    config = load_config()
    username = config.username

    def _list(state: StoreState) -> tuple[bool, list[Request]]:
        show_all = not mine and state.users.get_user_type(username) == UserType.ORGANIZER
        ids = state.requests.request_ids() if show_all else state.requests.user_requests(username)
        return show_all, [state.requests.get_request_with_id(i) for i in ids]

    show_all, requests = run_session(_list, "list requests", config=config, save=False)

    if json_flag:
        json_output(
            console,
            {
                "scope": "all" if show_all else "mine",
                "count": len(requests),
                "requests": [_request_dict(n, r) for n, r in enumerate(requests, start=1)],
            },
        )
        return
    if not requests:
        if show_all:
            console.print("[yellow]Sorry, there are no requests.[/yellow]")
        else:
            console.print("[yellow]Sorry, you have not made any requests.[/yellow]")
        return
    console.print("All requests:" if show_all else "Your requests:")
    for position, request in enumerate(requests, start=1):
        console.print(f"{position}: {request.render()}", end="", markup=False, highlight=False)
        console.print("[green]RESOLVED[/green]" if request.resolved else "[yellow]PENDING[/yellow]")
    console.print("End of requests.")


def respond_command(number: int, message: str, json_flag: bool) -> None:
    """Answer request ``number`` (organizers only, one reply per request)."""
    content = _validated(message)
    config = load_config()
    username = config.username

    def _respond(state: StoreState) -> str:
        require_organizer(state, username, "reply to requests")
        request_id = select_entry(state.requests.request_ids(), number)
        if state.requests.has_reply(request_id):
            raise CommandError("This request has already been replied to")
        state.requests.add_reply(content, request_id, username)
        state.requests.update_status(request_id)
        return request_id

    request_id = run_session(_respond, "reply to request", config=config)

    if json_flag:
        json_output(console, {"status": "resolved", "request_id": request_id})
    else:
        format_success(console, "Your reply has been recorded and the request resolved.")


def delete_request_command(number: int, json_flag: bool) -> None:
    """Remove request ``number`` for good (organizers only)."""
    config = load_config()
    username = config.username

    def _delete(state: StoreState) -> str:
        require_organizer(state, username, "delete requests")
        request_id = select_entry(state.requests.request_ids(), number)
        state.requests.delete_request(request_id)
        return request_id

    request_id = run_session(_delete, "delete request", config=config)

    if json_flag:
        json_output(console, {"status": "deleted", "request_id": request_id})
    else:
        format_success(console, "The request has been deleted.")
