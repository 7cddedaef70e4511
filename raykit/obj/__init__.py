"""Wavefront OBJ and MTL loading, with polygon triangulation."""