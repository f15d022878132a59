"""Example reducers exercised by the end-to-end scenario tests."""
