from __future__ import annotations

from pathlib import Path

from _infra import Mirror, banner, run

from errkit import LIST, STR, any_e_par, err_ln, fmap_rt
from errkit import lift as L
from kungfu import Error, Ok


async def main() -> None:
    banner("02_mirrors: AnyE over mirrors + try_io for the local copy")

    mirrors = [
        Mirror(name="eu", delay_seconds=0.02),
        Mirror(name="us", delay_seconds=0.01, files={"motd": b"hello "}),
        Mirror(name="ap", delay_seconds=0.03, files={"motd": b"world"}),
    ]

    # Every mirror runs, successes are concatenated in mirror order.
    downloads = [
        fmap_rt(
            bytes.decode,
            L.fail_with_m([f"{m.name}: not found"], lambda m=m: m.fetch("motd")),
        )
        for m in mirrors
    ]
    match await any_e_par(downloads, errors=LIST, results=STR):
        case Ok(text):
            print("remote:", text)
        case Error(problems):
            err_ln("; ".join(problems))

    local = L.try_io(lambda: Path("/nonexistent/motd").read_text())
    print("local present:", await L.is_right_t(local))
    print("local:", await L.hush_t(local).or_else("<none>"))


if __name__ == "__main__":
    run(main)
