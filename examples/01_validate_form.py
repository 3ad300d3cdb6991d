from __future__ import annotations

from _infra import banner, run

from errkit import LIST, all_e, err_ln
from errkit import lift as L
from kungfu import Error, Ok, Result


def check_name(form: dict[str, str]) -> Result[list[str], list[str]]:
    match L.note(["name: required"], form.get("name")):
        case Ok(name) if name.strip():
            return Ok([f"name={name}"])
        case Ok(_):
            return Error(["name: blank"])
        case Error(errs):
            return Error(errs)


def check_age(form: dict[str, str]) -> Result[list[str], list[str]]:
    raw = form.get("age", "")
    if not raw.isdigit():
        return Error([f"age: not a number: {raw!r}"])
    return Ok([f"age={int(raw)}"])


def check_email(form: dict[str, str]) -> Result[list[str], list[str]]:
    email = form.get("email", "")
    return Ok([f"email={email}"]) if "@" in email else Error(["email: missing @"])


async def main() -> None:
    banner("01_validate_form: AllE reports every failed field at once")

    for form in (
        {"name": "ada", "age": "36", "email": "ada@example.org"},
        {"name": " ", "age": "old", "email": "nope"},
    ):
        outcome = all_e(
            [check_name(form), check_age(form), check_email(form)],
            errors=LIST,
            results=LIST,
        )
        match outcome:
            case Ok(fields):
                print("accepted:", ", ".join(fields))
            case Error(problems):
                for problem in problems:
                    err_ln(f"rejected: {problem}")


if __name__ == "__main__":
    run(main)
