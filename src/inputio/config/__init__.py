"""Configuration for input.io"""
