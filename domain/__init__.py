"""Describes the camp stove recipe domain. Centres around `generate_recipe`.

Why is this hard?

- Creating a recipe is handed to a large language model behind an api.
  Its output is untrusted text that is meant to be JSON.
- The model is told to answer with a fixed phrase when the ingredients make no
  sense. That phrase has to be told apart from a broken answer.
- Once stored, a recipe is never modified.

The model and the store are passed in, so both can be faked.
"""
