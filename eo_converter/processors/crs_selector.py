"""
Target coordinate system selection.

Picks the single projected coordinate system every record will be
transformed into. When the records span more than one UTM zone or
hemisphere the user is asked to choose among the candidate systems.
"""

from typing import Callable, List, Optional, Sequence
import logging
import pandas as pd

from ..records import OrientationRecord
from ..utils.coordinates import lookup_name
from ..utils.error_handling import SelectionInputError, SelectionAbortedError

MENU_HEADER = ("More than one zone was detected. Please select the coordinate system "
               "in which to project the projection centers:")


class CoordinateSystemSelector:
    """
    Chooses one EPSG code for a set of orientation records.

    Console access is injected so the prompt can be driven without a terminal:
    ``input_func`` returns one response line and ``output_func`` writes one line.
    Menu entries and responses are both numbered from 1.
    """

    def __init__(self,
                 input_func: Optional[Callable[[], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None,
                 name_lookup: Callable[[int], str] = lookup_name):
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.name_lookup = name_lookup
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def distinct_codes(records: Sequence[OrientationRecord]) -> List[int]:
        """EPSG codes used by the records, in first-seen order."""
        return list(dict.fromkeys(record.epsg_code for record in records))

    @staticmethod
    def summarize(records: Sequence[OrientationRecord]) -> pd.Series:
        """Number of records per EPSG code, in first-seen order."""
        codes = pd.Series([record.epsg_code for record in records], name='epsg_code', dtype='int64')
        counts = codes.value_counts(sort=False)
        return counts.reindex(pd.unique(codes))

    def select(self, records: Sequence[OrientationRecord]) -> int:
        """
        Select the target EPSG code.

        Args:
            records: Parsed orientation records

        Returns:
            EPSG code of the target projected system

        Raises:
            ValueError: If no records are given
            SelectionAbortedError: If the response stream closes before a valid choice
        """
        codes = self.distinct_codes(records)
        if not codes:
            raise ValueError("Cannot select a coordinate system without records")

        if len(codes) == 1:
            self.logger.info(f"All records fall in EPSG:{codes[0]}")
            return codes[0]

        self.logger.info(f"Records span {len(codes)} coordinate systems: {codes}")
        names = [self.name_lookup(code) for code in codes]

        while True:
            self._show_menu(names)
            try:
                choice = self._read_choice(len(codes))
            except SelectionInputError as e:
                self.logger.debug(f"Ignoring selection response: {e}")
                continue

            selected = codes[choice - 1]
            self.logger.info(f"Selected EPSG:{selected} ({names[choice - 1]})")
            return selected

    def _show_menu(self, names: List[str]):
        self.output_func(MENU_HEADER)
        self.output_func("")
        for number, name in enumerate(names, 1):
            self.output_func(f"{number} : {name}")

    def _read_choice(self, count: int) -> int:
        """Read one response and return it as a 1-based menu number."""
        try:
            response = self.input_func()
        except EOFError as e:
            raise SelectionAbortedError(
                "Input closed before a coordinate system was selected") from e

        try:
            choice = int(response.strip())
        except ValueError:
            raise SelectionInputError(f"not a number: {response!r}")

        if not 1 <= choice <= count:
            raise SelectionInputError(f"{choice} is not between 1 and {count}")

        return choice
