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
Unit tests for the interactive selection prompt.
"""
import pytest
from unittest.mock import patch
from dockcli.PROMPT.selection_prompt import SelectionPrompt
from dockcli.errors import SelectionError


class TestSelectionPrompt:
    """Tests for SelectionPrompt.select_many."""

    def test_returns_checked_items(self):
        with patch("dockcli.PROMPT.selection_prompt.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.return_value = ["nginx", "db"]
            result = SelectionPrompt().select_many("Select services to start", ["all", "db", "nginx"])

        assert result == ["nginx", "db"]
        checkbox.assert_called_once_with("Select services to start", choices=["all", "db", "nginx"])

    def test_interrupt_raises_selection_error(self):
        with patch("dockcli.PROMPT.selection_prompt.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.side_effect = KeyboardInterrupt
            with pytest.raises(SelectionError, match="cancelled"):
                SelectionPrompt().select_many("Select services to stop", ["all"])

    def test_no_terminal_raises_selection_error(self):
        with patch("dockcli.PROMPT.selection_prompt.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.side_effect = EOFError()
            with pytest.raises(SelectionError):
                SelectionPrompt().select_many("Select services to stop", ["all"])

    def test_missing_answer(self):
        with patch("dockcli.PROMPT.selection_prompt.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.return_value = None
            with pytest.raises(SelectionError):
                SelectionPrompt().select_many("Select services to stop", ["all"])
