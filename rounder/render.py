"""
Text composition of rounded measurements for terminals, LaTeX, typst and gnuplot.

The renderer does no rounding: it prints the digits of the DecimalNumbers it is
given, so values are expected to come out of rounding.round_measurement().
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, replace
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .number import DecimalNumber
from .options import FormatOptions, OutputMode


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class SymbolTable:
    """
    Glyphs and delimiters of one output mode.

    Attributes:
        times: Multiplication sign in front of the factorized power of ten.
        cdot: Alternate multiplication sign, used with FormatOptions.cdot.
        plus_minus: Symbol in front of symmetric errors.
        group_open: Opens the (value ± error) group of a factorized measurement.
        group_close: Closes that group.
        brace_open: Opens a superscript or subscript argument.
        brace_close: Closes it.
        pre_space: Small space inserted before an upper/lower error pair.
        text_open: Opens a label.
        text_close: Closes a label.
    """
    times: str = "×"
    cdot: str = "·"
    plus_minus: str = "±"
    group_open: str = "("
    group_close: str = ")"
    brace_open: str = ""
    brace_close: str = ""
    pre_space: str = ""
    text_open: str = ""
    text_close: str = ""

    def ascii(self) -> "SymbolTable":
        """Same delimiters with ASCII multiplication and plus-minus glyphs."""
        return replace(self, times="x", cdot=".", plus_minus="+/-")


# @formatter:off
SYMBOLS = {
    OutputMode.TERMINAL: SymbolTable(),
    OutputMode.LATEX:    SymbolTable(times=" \\times ", cdot="\\cdot", plus_minus="\\pm",
                                     group_open="\\left( ", group_close=" \\right)",
                                     brace_open="{", brace_close="}", pre_space="\\,",
                                     text_open="\\text{", text_close="}"),
    OutputMode.TYPST:    SymbolTable(times=" times ", cdot=" dot.op ", plus_minus=" plus.minus ",
                                     brace_open="(", brace_close=")", pre_space="#h(0.0em)",
                                     text_open="\"", text_close="\""),
    OutputMode.GNUPLOT:  SymbolTable(cdot="· ", brace_open="{", brace_close="}"),
}
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def symbols(options: FormatOptions) -> SymbolTable:
    """Symbol table of the options' mode, with ASCII glyphs if requested."""
    table = SYMBOLS[options.mode]
    return table.ascii() if options.ascii_only else table


def render(central: DecimalNumber,
           errors: Sequence[DecimalNumber],
           options: FormatOptions | None = None) -> str:
    """
    Compose the text of a measurement from already rounded values.

    Symmetric errors are written as "± 0.23", upper and lower errors as "+0.30 -0.20"
    in terminal mode and as super/subscripts in the other modes. Each symmetric
    error and each upper/lower pair may be followed by its label.

    Args:
        central: Rounded central value.
        errors: Rounded errors; signed ones in upper/lower pairs.
        options: Rendering configuration, defaults to FormatOptions().

    Returns:
        The formatted measurement.

    Examples:
        >>> v, e = DecimalNumber.from_text("1.5"), [DecimalNumber.from_text("0.23")]
        >>> render(v, e)
        '1.5 ± 0.23'
        >>> render(v, e, FormatOptions(mode="latex", labels=["stat"]))
        '1.5 \\\\pm 0.23 \\\\text{stat}'
        >>> render(DecimalNumber(15, -1), [DecimalNumber(2, -1)], FormatOptions(factorize_powers=True))
        '(15 ± 2)×10^-1'
    """
    options = options if options is not None else FormatOptions()
    sym = symbols(options)
    factorize = options.factorize_powers and central.exponent != 0
    scripts = options.mode != OutputMode.TERMINAL

    out = []
    if factorize:
        out.append(sym.group_open)
    out.append(_number_text(central, central, options))

    count = 0
    for e in errors:
        out.append(" ")
        braced = e.sign != 0 and scripts
        if braced:
            if count % 2 == 0:
                out.append(sym.pre_space)
            out.append("^" if e.sign > 0 else "_")
            out.append(sym.brace_open)
        if e.sign == 0:
            out.append(sym.plus_minus)
            out.append(" ")
            # a symmetric error fills a whole label slot
            count += 1
        elif e.sign > 0:
            out.append("+")
        out.append(_number_text(e, central, options))
        if braced:
            out.append(sym.brace_close)
        count += 1
        if count % 2 == 0 and count // 2 - 1 < len(options.labels):
            out.append(" ")
            out.append(sym.text_open)
            out.append(options.labels[count // 2 - 1])
            out.append(sym.text_close)

    if factorize:
        out.append(sym.group_close)
        out.append(sym.cdot if options.cdot else sym.times)
        out.append("10")
        if central.exponent != 1:
            out.append("^")
            out.append(sym.brace_open)
            out.append(str(central.exponent))
            out.append(sym.brace_close)

    if options.trailing_newline:
        out.append("\n")
    return "".join(out)


# Private Methods ------------------------------------------------------------------------------------------------------

def _number_text(number: DecimalNumber, central: DecimalNumber, options: FormatOptions) -> str:
    """Digits of number, relative to the central power of ten when powers are factorized."""
    if not options.factorize_powers or number.exponent == central.exponent:
        return number.to_text(options.factorize_powers)
    return replace(number, exponent=number.exponent - central.exponent).to_text()
