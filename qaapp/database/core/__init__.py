"""
Core operations connecting the application with the store.

Contents
--------
- bootstrap
    Schema creation (`create_database`), sample data (`create_sample_data`),
    and the combined `bootstrap(settings)` returning `BootstrapResult`s.
- funcs
    Transactional lookups for the HTTP layer (`get_page_user`) and
    row counts (`table_counts`).
"""
