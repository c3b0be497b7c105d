# markov_text_generator/utils/__init__.py
# config, logging, corpus loading and model persistence helpers
