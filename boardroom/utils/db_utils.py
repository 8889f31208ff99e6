"""
Database utility functions for the Boardroom persona service
"""

from typing import Any, Dict, List, Mapping, Optional


class QueryBuilder:
    """Helper class for building SQL queries safely"""

    @staticmethod
    def select(
        table: str,
        columns: Optional[List[str]] = None,
        conditions: Optional[Dict[str, Any]] = None,
        schema: str = "boardroom"
    ) -> tuple[str, list]:
        """Build SELECT query with parameters"""
        columns_str = ", ".join(columns) if columns else "*"
        values = []

        query_parts = [f"SELECT {columns_str} FROM {schema}.{table}"]

        # Add WHERE clause
        if conditions:
            where_clauses = []
            param_index = 1
            for column, value in conditions.items():
                if isinstance(value, list):
                    # Handle IN clause
                    placeholders = [f"${j}" for j in range(param_index, param_index + len(value))]
                    where_clauses.append(f"{column} IN ({', '.join(placeholders)})")
                    values.extend(value)
                    param_index += len(value)
                else:
                    where_clauses.append(f"{column} = ${param_index}")
                    values.append(value)
                    param_index += 1

            query_parts.append(f"WHERE {' AND '.join(where_clauses)}")

        return " ".join(query_parts), values


def record_to_dict(record: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Convert an asyncpg Record (or any mapping) to a plain dict"""
    if record is None:
        return None
    return {key: record[key] for key in record.keys()}

