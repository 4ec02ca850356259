#!python
# Copyright (c) 2022 The OpenCitations Index Authors.
#
# Permission to use, copy, modify, and/or distribute this software for any purpose
# with or without fee is hereby granted, provided that the above copyright notice
# and this permission notice appear in all copies.
#
# THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES WITH
# REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF MERCHANTABILITY AND
# FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR ANY SPECIAL, DIRECT, INDIRECT,
# OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES WHATSOEVER RESULTING FROM LOSS OF USE,
# DATA OR PROFITS, WHETHER IN AN ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS
# ACTION, ARISING OUT OF OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS
# SOFTWARE.

import os
import pandas as pd
from tqdm import tqdm

from oc.ispn.validate.base import get_manager
from oc.ispn.utils.config import get_config
from oc.ispn.utils.logging import get_logger


class BatchValidator(object):
    """It validates the identifiers stored in a column of CSV files, e.g. the
    ISBN column of a catalogue about to be imported."""

    def __init__(self, scheme, column=None):
        """Batch validator constructor.

        Args:
            scheme (str): the identifier scheme, e.g. "isbn" or "ean13"
            column (str, optional): the column holding the identifiers. Defaults
                to the option "column" of the section "batch", or "id".
        """
        self._config = get_config()
        self._logger = get_logger()
        self._manager = get_manager(scheme)
        self._column = column or self._config.get("batch", "column", fallback="id")
        self._chunksize = self._config.getint("batch", "chunksize", fallback=1000)

    def validate_file(self, input_file, output_file=None, disable_tqdm=False):
        """It checks every identifier of the input file. When an output file is
        specified, the input rows are written there with an additional column
        "valid".

        Args:
            input_file (str): the CSV file to validate
            output_file (str, optional): where to store the checked rows. Defaults to None.
            disable_tqdm (bool, optional): disable the progress bar. Defaults to False.

        Raises:
            KeyError: if the identifier column is not in the file

        Returns:
            tuple: the number of valid and of invalid identifiers
        """
        self._logger.info("Reading identifiers from " + input_file)
        valid = 0
        invalid = 0
        header = True
        try:
            reader = pd.read_csv(
                input_file, chunksize=self._chunksize, dtype=str, keep_default_na=False
            )
        except pd.errors.EmptyDataError:
            self._logger.warning("Skipping empty file " + input_file)
            return 0, 0

        for chunk in reader:
            if self._column not in chunk.columns:
                raise KeyError(
                    "Column '%s' not found in %s" % (self._column, input_file)
                )

            results = [
                self._manager.is_valid(id_string)
                for id_string in tqdm(chunk[self._column], disable=disable_tqdm)
            ]
            chunk["valid"] = results
            valid += results.count(True)
            invalid += results.count(False)

            if output_file is not None:
                chunk.to_csv(
                    output_file, mode="w" if header else "a", header=header, index=False
                )
                header = False

        self._logger.info(
            "%d valid and %d invalid identifiers in %s" % (valid, invalid, input_file)
        )
        return valid, invalid

    def validate_directory(self, input_directory, output_directory, disable_tqdm=False):
        """It validates all the CSV files of a directory, storing the results in
        files with the same name in the output directory.

        Returns:
            dict: the number of valid and invalid identifiers for each file name
        """
        if not os.path.exists(output_directory):
            os.makedirs(output_directory)

        summary = {}
        for filename in sorted(os.listdir(input_directory)):
            if filename.endswith(".csv"):
                summary[filename] = self.validate_file(
                    os.path.join(input_directory, filename),
                    os.path.join(output_directory, filename),
                    disable_tqdm=disable_tqdm,
                )
        return summary
