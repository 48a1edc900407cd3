"""
Configuration of measurement rounding and formatting.

FormatOptions is an immutable value read once per formatting call. Derived
configurations are built with FormatOptions.merge() or from a string of flag
letters with FormatOptions.from_format_spec().
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from dataclasses import dataclass, field
from enum import StrEnum, unique
from typing import Iterable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET, UnsetType, ifnotunset
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class OutputMode(StrEnum):
    """
    Target of the formatted text.

    TERMINAL: plain Unicode text, "1.5 ± 0.23".
    LATEX: math-mode LaTeX, "1.5 \\pm 0.23".
    TYPST: typst math, "1.5  plus.minus  0.23".
    GNUPLOT: gnuplot enhanced text, superscripts and subscripts in braces.
    """
    TERMINAL = "terminal"
    LATEX = "latex"
    TYPST = "typst"
    GNUPLOT = "gnuplot"


@unique
class RoundAlgorithm(StrEnum):
    """
    Significant-digit policy applied to uncertainties.

    PDG: 2 or 1 significant digits depending on the three leading digits, as in
         the Review of Particle Physics.
    TWO_DIGIT: always 2 significant digits.
    """
    PDG = "pdg"
    TWO_DIGIT = "two_digit"


@dataclass(frozen=True)
class FormatOptions:
    """
    Rounding and rendering controls for one measurement.

    Attributes:
        mode: Output mode, an OutputMode or its string value.
        algorithm: Rounding policy, a RoundAlgorithm or its string value.
        symmetrize_errors: Merge asymmetric pairs differing by less than symmetrize_threshold.
        round_to_total_error: Match all values to the precision of the quadrature sum of the errors.
            Takes priority over round_to_larger_error.
        round_to_larger_error: Match all values to the precision of the least precise error.
        factorize_powers: Write the power of ten once, "(15 ± 2)×10^-1".
        ascii_only: Replace ×, · and ± with x, . and +/-.
        cdot: Use the dot glyph instead of × in front of the power of ten.
        trailing_newline: Terminate the text with a newline.
        labels: One label per symmetric error or asymmetric pair, copied into a tuple.
        symmetrize_threshold: Relative difference below which asymmetric pairs are merged.

    Examples:
        >>> opts = FormatOptions(mode="latex")
        >>> opts.mode
        <OutputMode.LATEX: 'latex'>
        >>> opts.merge(algorithm="two_digit").algorithm
        <RoundAlgorithm.TWO_DIGIT: 'two_digit'>
    """
    mode: OutputMode = OutputMode.TERMINAL
    algorithm: RoundAlgorithm = RoundAlgorithm.PDG

    symmetrize_errors: bool = False
    round_to_total_error: bool = False
    round_to_larger_error: bool = True
    factorize_powers: bool = False
    ascii_only: bool = False
    cdot: bool = False
    trailing_newline: bool = False

    labels: tuple[str, ...] = field(default=())
    symmetrize_threshold: float = 0.10

    def __post_init__(self):
        """Validate and coerce fields"""
        try:
            object.__setattr__(self, "mode", OutputMode(self.mode))
        except ValueError:
            raise ValueError(f"mode expected one of {[m.value for m in OutputMode]}, "
                             f"but found {fmt_value(self.mode)}") from None

        try:
            object.__setattr__(self, "algorithm", RoundAlgorithm(self.algorithm))
        except ValueError:
            raise ValueError(f"algorithm expected one of {[a.value for a in RoundAlgorithm]}, "
                             f"but found {fmt_value(self.algorithm)}") from None

        for name in ("symmetrize_errors", "round_to_total_error", "round_to_larger_error",
                     "factorize_powers", "ascii_only", "cdot", "trailing_newline"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be bool, but got {fmt_type(getattr(self, name))}")

        labels = self.labels
        if labels is None:
            labels = ()
        if isinstance(labels, str) or not isinstance(labels, abc.Iterable):
            raise TypeError(f"labels must be an iterable of str, but got {fmt_type(labels)}")
        labels = tuple(labels)
        for label in labels:
            if not isinstance(label, str):
                raise TypeError(f"labels must contain str only, but got {fmt_type(label)}")
        object.__setattr__(self, "labels", labels)

        if isinstance(self.symmetrize_threshold, bool) or not isinstance(self.symmetrize_threshold, (int, float)):
            raise TypeError(f"symmetrize_threshold must be float, but got {fmt_type(self.symmetrize_threshold)}")
        if self.symmetrize_threshold < 0:
            raise ValueError(f"symmetrize_threshold must be >= 0, but got {fmt_value(self.symmetrize_threshold)}")

    @property
    def quiet(self) -> bool:
        """True unless zero-padding warnings are wanted, i.e. outside terminal mode with factorized powers."""
        return not (self.mode == OutputMode.TERMINAL and self.factorize_powers)

    @classmethod
    def from_format_spec(cls, spec: str) -> Self:
        """
        Build options from a string of single-letter flags.

        This is the language of Measurement.__format__, f"{m:pX}". Without letters
        the result rounds to two significant digits of the total error.

        Letters:
            c: two significant digits, precision of the total error
            e: precision of the total (quadrature) error
            l: precision of the larger error
            p: PDG rounding
            s: symmetrize errors within 10%
            t: two significant digits
            D: "·" instead of "×"
            F: factorize powers of ten
            G: gnuplot mode
            T: typst mode
            U: no UTF-8 glyphs
            X: LaTeX mode

        L (labels) and N (trailing newline) have no meaning inline and are
        skipped, as are unknown letters.

        Examples:
            >>> FormatOptions.from_format_spec("pX").mode
            <OutputMode.LATEX: 'latex'>
        """
        if not isinstance(spec, str):
            raise TypeError(f"format spec must be str, but got {fmt_type(spec)}")

        kwargs = dict(algorithm=RoundAlgorithm.TWO_DIGIT, round_to_total_error=True, round_to_larger_error=False)
        for letter in spec:
            if letter == "c":
                kwargs.update(algorithm=RoundAlgorithm.TWO_DIGIT, round_to_total_error=True,
                              round_to_larger_error=False)
            elif letter == "e":
                kwargs.update(round_to_total_error=True, round_to_larger_error=False)
            elif letter == "l":
                kwargs.update(round_to_total_error=False, round_to_larger_error=True)
            elif letter == "p":
                kwargs.update(algorithm=RoundAlgorithm.PDG)
            elif letter == "s":
                kwargs.update(symmetrize_errors=True)
            elif letter == "t":
                kwargs.update(algorithm=RoundAlgorithm.TWO_DIGIT)
            elif letter == "D":
                kwargs.update(cdot=True)
            elif letter == "F":
                kwargs.update(factorize_powers=True)
            elif letter == "G":
                kwargs.update(mode=OutputMode.GNUPLOT)
            elif letter == "T":
                kwargs.update(mode=OutputMode.TYPST)
            elif letter == "U":
                kwargs.update(ascii_only=True)
            elif letter == "X":
                kwargs.update(mode=OutputMode.LATEX)
        return cls(**kwargs)

    def merge(self,
              # Attrs override
              mode: OutputMode | str | UnsetType = UNSET,
              algorithm: RoundAlgorithm | str | UnsetType = UNSET,
              symmetrize_errors: bool | UnsetType = UNSET,
              round_to_total_error: bool | UnsetType = UNSET,
              round_to_larger_error: bool | UnsetType = UNSET,
              factorize_powers: bool | UnsetType = UNSET,
              ascii_only: bool | UnsetType = UNSET,
              cdot: bool | UnsetType = UNSET,
              trailing_newline: bool | UnsetType = UNSET,
              labels: Iterable[str] | UnsetType = UNSET,
              symmetrize_threshold: float | UnsetType = UNSET,
              ) -> "FormatOptions":
        """
        Create a new FormatOptions instance with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.

        Returns:
            New FormatOptions instance with merged configuration.
        """
        return FormatOptions(
            mode=ifnotunset(mode, default=self.mode),
            algorithm=ifnotunset(algorithm, default=self.algorithm),
            symmetrize_errors=ifnotunset(symmetrize_errors, default=self.symmetrize_errors),
            round_to_total_error=ifnotunset(round_to_total_error, default=self.round_to_total_error),
            round_to_larger_error=ifnotunset(round_to_larger_error, default=self.round_to_larger_error),
            factorize_powers=ifnotunset(factorize_powers, default=self.factorize_powers),
            ascii_only=ifnotunset(ascii_only, default=self.ascii_only),
            cdot=ifnotunset(cdot, default=self.cdot),
            trailing_newline=ifnotunset(trailing_newline, default=self.trailing_newline),
            labels=ifnotunset(labels, default=self.labels),
            symmetrize_threshold=ifnotunset(symmetrize_threshold, default=self.symmetrize_threshold),
        )
