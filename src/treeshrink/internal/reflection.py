# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Introspection helpers, used to give strategies built from user functions
a readable repr."""

import ast
import inspect
import textwrap
import types

LAMBDA_SOURCE_CACHE = {}


def _lambda_arguments(f):
    try:
        return str(inspect.signature(f))[1:-1]
    except (TypeError, ValueError):  # pragma: no cover
        return "..."


def _argument_names(node):
    args = node.args
    names = [a.arg for a in args.posonlyargs + args.args]
    if args.vararg is not None:
        names.append(args.vararg.arg)
    names.extend(a.arg for a in args.kwonlyargs)
    if args.kwarg is not None:
        names.append(args.kwarg.arg)
    return names


def _extract_lambda_source(f):
    """Extracts a single lambda expression from the source of the line(s) it
    was defined on. Returns a string indicating an unknown body if it gets
    confused in any way."""
    if_confused = "lambda %s: <unknown>" % (_lambda_arguments(f),)
    try:
        source = inspect.getsource(f)
    except (OSError, TypeError):
        return if_confused
    source = textwrap.dedent(source).strip()

    code = f.__code__
    expected = list(code.co_varnames[: code.co_argcount + code.co_kwonlyargcount])
    if code.co_flags & inspect.CO_VARARGS:
        expected.append(code.co_varnames[len(expected)])
    if code.co_flags & inspect.CO_VARKEYWORDS:
        expected.append(code.co_varnames[len(expected)])

    start = source.find("lambda")
    while start != -1:
        candidate = source[start:]
        # getsource gives us whole lines, so trim trailing text until what is
        # left parses as a single lambda expression.
        for end in range(len(candidate), 0, -1):
            try:
                tree = ast.parse(candidate[:end], mode="eval")
            except SyntaxError:
                continue
            body = tree.body
            if isinstance(body, ast.Tuple) and body.elts:
                # The lambda was followed by further arguments on its line.
                body = body.elts[0]
            if (
                isinstance(body, ast.Lambda)
                and sorted(_argument_names(body)) == sorted(expected)
            ):
                return ast.unparse(body)
            break
        start = source.find("lambda", start + 1)
    return if_confused


def extract_lambda_source(f):
    try:
        return LAMBDA_SOURCE_CACHE[f.__code__]
    except KeyError:
        pass
    result = _extract_lambda_source(f)
    LAMBDA_SOURCE_CACHE[f.__code__] = result
    return result


def get_pretty_function_description(f):
    if not hasattr(f, "__name__"):
        return repr(f)
    name = f.__name__
    if name == "<lambda>":
        return extract_lambda_source(f)
    elif isinstance(f, (types.MethodType, types.BuiltinMethodType)):
        self = f.__self__
        if not (self is None or inspect.isclass(self) or inspect.ismodule(self)):
            return "%r.%s" % (self, name)
    return name
