from main import usage_error


class TestUsageError:
    def test_numbered_commands_need_a_number(self):
        assert usage_error("page", "abc") == "Usage: page <n>"
        assert usage_error("open", "x") == "Usage: open <i>"
        assert usage_error("page", "") == "Usage: page <n>"

    def test_valid_numbers_pass(self):
        assert usage_error("page", "3") is None
        assert usage_error("open", "10") is None

    def test_multi_word_input_is_a_search(self):
        assert usage_error("open", "source licenses") is None

    def test_other_commands_are_ignored(self):
        assert usage_error("n", "") is None
        assert usage_error("rust", "ownership") is None
