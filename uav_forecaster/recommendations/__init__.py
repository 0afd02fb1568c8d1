"""
Flight-time recommendation: picks the best safe window of the day.

Modules
-------
composer : select_best_period() + build_message() +
           compose_flight_recommendation() — pure functions, no I/O.
"""
