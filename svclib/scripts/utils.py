"""
Helpers for converting methods into scripts, and filling in arguments with services.
"""

from functools import wraps
from inspect import cleandoc, signature
import logging
import sys
from typing import Any, Callable, cast, Dict, List, NewType, Optional, Union

from docopt import docopt

from ..plumbing import commands
from ..plumbing.common import CommandUnavailable, Service
from ..tasks.services import get_service


DocOptArgs = Dict[str, Union[bool, str, List[str]]]

ServiceName = NewType("ServiceName", str)
"""
Annotation for a service argument passed to the init system as given, without checking that it
appears in the host's list of services.
"""

NoneType = type(None)


ENTRYPOINTS: List[str] = []


def entrypoint(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator to make an entrypoint out of a generic function.

    This uses `docopt` to parse arguments according to the method docstring, and will be formatted
    with `{script}` set to the script name.  At minimum, it should contain `Usage: {script}`.

    Functions may optionally accept arguments, but they must be annotated with a recognised type in
    order to be filled in.  The following types are available:

    - `DocOptArgs` (a `dict` of input parameters parsed from the usage line)
    - `Service` (looked up from an input parameter matching the variable name, declared in the
      usage line either in upper case or surrounded by arrow brackets, e.g. `SERVICE`)
    - `ServiceName` (as `Service`, but taken as given: units with no boot state, such as static
      ones, are missing from the list of services but can still be started and stopped)

    When run from the command line, all required external commands must be available.

    An example function:

        @entrypoint
        def start(opts: DocOptArgs, service: ServiceName):
            \"""
            Start a service.

            Usage: {script} SERVICE
            \"""
    """
    label = "svclib-{}-{}".format(fn.__module__.rsplit(".", 1)[-1],
                                  fn.__qualname__).replace("_", "-")

    @wraps(fn)
    def wrap(opts: Optional[DocOptArgs] = None):
        extra: Dict[str, Any] = {}
        script = "{} [--debug]".format(label)
        cli = opts is None
        if cli:
            doc = cleandoc(fn.__doc__.format(script=script))
            opts = docopt(doc)
        if opts.pop("--debug", False):
            logging.basicConfig(level=logging.DEBUG)
        if cli:
            try:
                commands.check()
            except CommandUnavailable as ex:
                error("{}: {}".format(ex.strerror, ex.filename), exit=1)
        # Detect resolvable-typed arguments and fill in their values.
        sig = signature(fn)
        ok = True
        for param in sig.parameters.values():
            name = param.name
            cls = param.annotation
            if cls is DocOptArgs:
                extra[name] = opts
                continue
            try:
                try:
                    value = cast(str, opts[name.upper()])
                except KeyError:
                    value = cast(str, opts["<{}>".format(name)])
            except KeyError:
                raise RuntimeError("Missing argument {!r}".format(name))
            optional = False
            # Unpick Optional[X] by reading the type object arguments and removing type(None).
            if getattr(cls, "__origin__", None) is Union:
                cls_args = cls.__args__
                if NoneType in cls_args:
                    optional = True
                    # NB. Union[X] for a single type X automatically resolves to X.
                    cls = Union[tuple(arg for arg in cls_args if arg is not NoneType)]
            if value is None and optional:
                extra[name] = None
                continue
            try:
                if cls is Service:
                    extra[name] = get_service(value)
                elif cls is ServiceName:
                    extra[name] = Service(value)
                else:
                    raise RuntimeError("Bad parameter {!r} type {!r}".format(name, cls))
            except KeyError:
                ok = False
                error("{!r} is not a known service".format(value), colour="1")
        if not ok:
            sys.exit(1)
        return fn(**extra)
    wrap.__doc__ = wrap.__doc__.format(script=label)
    # Create a console script line for setup.
    target = "{}:{}".format(fn.__module__, fn.__qualname__)
    ENTRYPOINTS.append("{}={}".format(label, target))
    return wrap


def confirm(msg: str = "Are you sure?"):
    """
    Prompt for confirmation before changing a service.
    """
    try:
        yn = input("\033[96m{} [yN]\033[0m ".format(msg))
    except (KeyboardInterrupt, EOFError):
        print()
        yn = "n"
    if yn.lower() not in ("y", "yes"):
        error("Aborted!", exit=1)


def error(msg: Optional[str] = None, *, exit: Optional[int] = None, colour: Optional[str] = None):
    """
    Print an error message and/or exit.
    """
    if msg:
        colour = colour or ("1" if exit else "3")
        print("\033[9{}m{}\033[0m".format(colour, msg), file=sys.stderr)
    if exit is not None:
        sys.exit(exit)
