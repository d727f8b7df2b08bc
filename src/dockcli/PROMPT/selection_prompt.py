# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Interactive multi-select prompt for choosing services.
"""
from typing import List, Sequence
import questionary
from ..errors import SelectionError


class SelectionPrompt:
    """
    Asks the operator to tick any number of items from a list.
    """
    def select_many(self, label: str, candidates: Sequence[str]) -> List[str]:
        """
        Shows a checkbox list and returns the ticked items.

        :param label: The question shown above the list.
        :param candidates: Items to choose from, in display order.
        :return: The chosen items.
        :raises SelectionError: If the prompt is aborted or cannot run.
        """
        question = questionary.checkbox(label, choices=list(candidates))
        try:
            answer = question.unsafe_ask()
        except KeyboardInterrupt as e:
            raise SelectionError("selection cancelled by user") from e
        except (EOFError, OSError) as e:
            raise SelectionError(f"cannot read selection: {e}") from e

        if answer is None:
            raise SelectionError("no answer received")
        return list(answer)
