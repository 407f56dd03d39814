"""UI testing: page objects and end-to-end tests for the-internet.herokuapp.com."""
