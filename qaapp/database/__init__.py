"""
The `database` package is responsible for all interactions with the application's store.
It provides configuration, entity definitions, data access objects and the bootstrap
routines that create and seed the SQLite file.

Contents:
    - config:
        Settings and the SQLAlchemy engine factory / declarative base.

    - entities:
        SQLAlchemy entity models for the users, questions, answers, tags and badges tables.

    - daos:
        Data Access Objects (DAOs) providing create / fetch / count operations.

    - core:
        Store bootstrap and the transactional functions used by the HTTP layer.

    - helpers:
        Transaction management and flat text list utilities.
"""
