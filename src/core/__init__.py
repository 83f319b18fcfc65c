"""
Core do serviço de registros de RH.

Recursos: units, bands, positions, workers. O motor genérico de consulta
(campos, filtros, paginação e projeção) fica em shared.query.

Não importa Django; todo acesso a dados passa pelos Ports assíncronos.
"""
