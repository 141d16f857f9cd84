"""Handler for ``.prop`` problem files.

A problem file lists premises and exactly one conclusion, one statement
per line, each terminated by a period::

    % modus ponens
    premise p1: A > B.
    premise: A.
    conclusion: B.
"""

from typing import List

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from propatlas.core.exceptions import ProblemFormatError
from propatlas.core.problem import Problem
from .base import FileFormat

proplexer = Lark(r"""
    %import common.WS
    %ignore WS
    %ignore COMMENT_LINE

    problem_file : statement*

    statement : ROLE NAME? ":" FORMULA "."

    ROLE : "premise" | "conclusion"
    NAME : /[a-z_][a-z0-9_]*/
    FORMULA : /[^.%\n]+/
    COMMENT_LINE : /%[^\n]*/
""", start='problem_file', parser='lalr')


class _ProblemBuilder(Transformer):
    def statement(self, children):
        role = str(children[0])
        name = str(children[1]) if len(children) == 3 else None
        formula = str(children[-1]).strip()
        if not formula:
            raise ProblemFormatError(f"empty {role}", children[0].line)
        return role, name, formula, children[0].line

    def problem_file(self, statements):
        premises, names, conclusions = [], [], []
        for role, name, formula, line in statements:
            if role == "premise":
                premises.append(formula)
                names.append(name)
            else:
                conclusions.append((formula, line))
        if not conclusions:
            raise ProblemFormatError("missing conclusion")
        if len(conclusions) > 1:
            raise ProblemFormatError("more than one conclusion", conclusions[1][1])
        return Problem(premises=premises, conclusion=conclusions[0][0], premise_names=names)


class PropFormat(FileFormat):
    """Handler for the ``.prop`` problem format."""

    def parse_string(self, content: str, **kwargs) -> Problem:
        try:
            tree = proplexer.parse(content)
        except UnexpectedInput as e:
            raise ProblemFormatError(f"unexpected input at column {e.column}", e.line) from e
        try:
            problem = _ProblemBuilder().transform(tree)
        except VisitError as e:
            if isinstance(e.orig_exc, ProblemFormatError):
                raise e.orig_exc from e
            raise
        problem.name = kwargs.get('name')
        return problem

    def format_problem(self, problem: Problem, **kwargs) -> str:
        lines = []
        if problem.name:
            lines.append(f"% {problem.name}")
        for name, premise in zip(problem.premise_names, problem.premises):
            label = f"premise {name}" if name else "premise"
            lines.append(f"{label}: {premise}.")
        lines.append(f"conclusion: {problem.conclusion}.")
        return '\n'.join(lines) + '\n'

    @property
    def name(self) -> str:
        return "prop"

    @property
    def extensions(self) -> List[str]:
        return ['.prop']
