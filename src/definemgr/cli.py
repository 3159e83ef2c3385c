from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from rich.prompt import Confirm, Prompt

from definemgr.core.errors import DefineManagerError, IndexOutOfRange, TokenError
from definemgr.core.logging import logger, LEVELS
from definemgr.managed.store import JsonPrefs, ManagedSetStore
from definemgr.session import DefineSession
from definemgr.system.settings import Settings
from definemgr.targets import ProjectFlagsFile, Target
from definemgr.ui.render import console, defines_table, targets_table, show_report, show_note, target_choices

HELP = """Commands:
  list | targets | reload | current
  add <DEFINE> | rm <N> | on <N> | off <N>
  target <NAME> | all (toggle apply-to-all) | save
  options | quit"""

def _confirm_all() -> bool:
    return Confirm.ask(
        "Apply defines to ALL build targets? This will overwrite (keeping other unmanaged ones).",
        default=False,
        console=console,
    )

def _save(session: DefineSession, everywhere: bool, assume_yes: bool) -> int:
    if everywhere and not assume_yes and not _confirm_all():
        console.print("Cancelled.")
        return 1
    report = session.save_defines(apply_to_all=everywhere)
    show_report(report)
    return 0 if report.ok else 1

def _options(session: DefineSession, settings: Settings):
    """Interactive options, persisted to the settings file."""
    console.print(f"1) Apply to all targets [{settings.data.apply_to_all}]")
    console.print(f"2) Log level (DEBUG/INFO/WARN/ERROR) [{settings.data.log_level}]")
    choice = Prompt.ask("Option (blank to return)", default="", console=console).strip()
    if choice == "1":
        settings.data.apply_to_all = not settings.data.apply_to_all
    elif choice == "2":
        settings.data.log_level = Prompt.ask("Level", choices=list(LEVELS), console=console)
    settings.data.normalize()
    settings.apply_log_level()
    session.apply_to_all = settings.data.apply_to_all
    settings.save()

def _interactive(session: DefineSession, settings: Settings) -> int:
    console.print(HELP)
    show_note()
    try:
        _command_loop(session, settings)
    except (EOFError, KeyboardInterrupt):
        console.print()
    finally:
        session.close()
    return 0

def _command_loop(session: DefineSession, settings: Settings):
    while True:
        if session.refresh_if_target_changed():
            console.print(f"Active target changed, now editing {session.selected.value}")
        raw = Prompt.ask(":", default="", console=console).strip()
        cmd, _, arg = raw.partition(" ")
        arg = arg.strip()
        try:
            if cmd in ("exit", "quit", "q"):
                break
            elif cmd in ("", "list", "ls"):
                console.print(defines_table(session))
            elif cmd == "targets":
                console.print(targets_table(session))
            elif cmd == "add":
                entry = session.add(arg)
                console.print(f"Added {entry.token}")
            elif cmd == "rm":
                entry = session.remove(int(arg))
                console.print(f"Removed {entry.token}")
            elif cmd in ("on", "off"):
                session.toggle(int(arg), cmd == "on")
            elif cmd == "target":
                session.select(Target.parse(arg))
                console.print(defines_table(session))
            elif cmd == "current":
                console.print(f"Using {session.use_current().value}")
            elif cmd == "reload":
                session.reload()
                console.print(defines_table(session))
            elif cmd == "all":
                session.apply_to_all = not session.apply_to_all
                console.print(f"Apply to all targets: {session.apply_to_all}")
            elif cmd == "save":
                _save(session, session.apply_to_all, assume_yes=False)
            elif cmd == "options":
                _options(session, settings)
            else:
                console.print(HELP)
        except (TokenError, IndexOutOfRange, ValueError) as e:
            console.print(f"[yellow]{e}[/yellow]")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="definemgr", description="Manage scripting defines per build target.")
    p.add_argument("--settings", help="settings file (default ~/.definemgr_settings.json)")
    p.add_argument("--prefs", help="managed define list store")
    p.add_argument("--project", help="project defines file")
    p.add_argument("--target", choices=target_choices(), help="build target (default: project's active target)")
    p.add_argument("--log-level", choices=list(LEVELS))
    sub = p.add_subparsers(dest="command")
    sub.add_parser("list", help="show managed defines and their state")
    sub.add_parser("targets", help="show defines of every build target")
    add = sub.add_parser("add", help="manage a new define")
    add.add_argument("define")
    rm = sub.add_parser("remove", help="stop managing a define")
    rm.add_argument("index", type=int)
    for name in ("enable", "disable"):
        t = sub.add_parser(name, help=f"{name} a managed define and save")
        t.add_argument("index", type=int)
        t.add_argument("--all", action="store_true", help="apply to every build target")
        t.add_argument("--yes", action="store_true", help="skip confirmation")
    save = sub.add_parser("save", help="write the managed defines to the target(s)")
    save.add_argument("--all", action="store_true", help="apply to every build target")
    save.add_argument("--yes", action="store_true", help="skip confirmation")
    sub.add_parser("interactive", help="interactive editing loop")
    return p

def _open_session(args, settings: Settings) -> DefineSession:
    prefs_path = args.prefs or settings.data.resolved_prefs_path()
    project_path = args.project or settings.data.resolved_project_path()
    session = DefineSession(
        ManagedSetStore(JsonPrefs(prefs_path)),
        ProjectFlagsFile(project_path),
        apply_to_all=settings.data.apply_to_all,
    )
    return session.open(Target.parse(args.target) if args.target else None)

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load(args.settings)
    if args.log_level:
        settings.data.log_level = args.log_level
    settings.apply_log_level()
    command = args.command or "list"
    try:
        session = _open_session(args, settings)
        if command == "list":
            console.print(defines_table(session))
        elif command == "targets":
            console.print(targets_table(session))
        elif command == "add":
            entry = session.add(args.define)
            session.close()
            console.print(f"Added {entry.token}")
        elif command == "remove":
            entry = session.remove(args.index)
            session.close()
            console.print(f"Removed {entry.token}")
        elif command in ("enable", "disable"):
            session.toggle(args.index, command == "enable")
            return _save(session, args.all, args.yes)
        elif command == "save":
            return _save(session, args.all or session.apply_to_all, args.yes)
        elif command == "interactive":
            return _interactive(session, settings)
    except DefineManagerError as e:
        logger.error("Command failed", command=command, error=str(e))
        console.print(f"[red]{e}[/red]")
        return 1
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return 1
    return 0

def run():
    sys.exit(main())
