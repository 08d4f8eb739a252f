"""Weeny - personal task tracker."""
